from pydantic import BaseModel, ConfigDict


class PosRecord(BaseModel):
    """Base for every stored record.

    Optional fields default to ``None`` and are only written when they were
    set explicitly, so a record read back equals the one that was saved.
    Unknown fields are kept.
    """

    model_config = ConfigDict(extra="allow")


class PosEntity(PosRecord):
    id: str
