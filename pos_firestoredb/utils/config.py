from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PersistenceErrorPolicy(str, Enum):
    """What a repository does when a Firestore write fails."""

    RAISE = "raise"
    REPORT = "report"


def _env(name: str) -> AliasChoices:
    return AliasChoices(f"FIREBASE_{name}", f"VITE_FIREBASE_{name}")


class FirebaseConfig(BaseSettings):
    """Firebase web-app configuration, read from the environment or a ``.env`` file."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    api_key: Optional[str] = Field(default=None, validation_alias=_env("API_KEY"))
    auth_domain: Optional[str] = Field(default=None, validation_alias=_env("AUTH_DOMAIN"))
    project_id: Optional[str] = Field(default=None, validation_alias=_env("PROJECT_ID"))
    storage_bucket: Optional[str] = Field(default=None, validation_alias=_env("STORAGE_BUCKET"))
    messaging_sender_id: Optional[str] = Field(default=None, validation_alias=_env("MESSAGING_SENDER_ID"))
    app_id: Optional[str] = Field(default=None, validation_alias=_env("APP_ID"))

    credentials_file: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_APPLICATION_CREDENTIALS", "FIREBASE_CREDENTIALS_FILE"),
    )
    app_name: str = Field(default="[DEFAULT]", validation_alias="FIREBASE_APP_NAME")

    @classmethod
    def from_env(cls) -> "FirebaseConfig":
        return cls()

    def is_configured(self) -> bool:
        # storage bucket, sender id and app id are passed through unchecked
        return bool(self.api_key and self.auth_domain and self.project_id)


@lru_cache(maxsize=1)
def get_config() -> FirebaseConfig:
    return FirebaseConfig.from_env()
