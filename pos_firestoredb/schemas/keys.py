from dataclasses import dataclass


@dataclass
class FireStoreKeys:
    timestamp = "timestamp"
    settingsDocumentId = "main"
