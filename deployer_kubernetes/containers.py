from typing import Optional

from pydantic import Field, field_validator

from .json import JsonBaseModel


class InitContainer(JsonBaseModel):
    """A fully custom init container run ahead of the application container."""

    image_name: Optional[str] = None
    container_name: Optional[str] = None
    commands: list[str] = Field(default_factory=list)

    @field_validator("commands", mode="before")
    @classmethod
    def decode_commands(cls, v: str | list[str] | None) -> list[str]:
        if v is None:
            return []
        if isinstance(v, str):
            return [command.strip() for command in v.split(",") if command.strip()]
        return v
