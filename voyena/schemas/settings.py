"""Key/value setting schemas."""

from voyena.schemas.base import BaseSchema


class SettingWrite(BaseSchema):
    """Body for storing a setting value."""

    value: str


class SettingRead(BaseSchema):
    """A setting lookup; value is null when the key was never set."""

    key: str
    value: str | None = None
