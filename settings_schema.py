from typing import Literal

from pydantic import BaseModel, ValidationError as PydanticValidationError

from errors import ValidationError


class SettingsSchema(BaseModel):
    log_level: str = "INFO"
    persist_reminders: bool = True
    schedule_notifications: bool = True
    weight_unit: Literal["kg", "lb"] = "kg"
    time_format: Literal["12h", "24h"] = "24h"


def validate_settings(data: dict) -> None:
    try:
        SettingsSchema(**data)
    except PydanticValidationError as e:
        raise ValidationError(str(e))
