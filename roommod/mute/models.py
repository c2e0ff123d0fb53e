"""Mute list models."""
from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field


class PlayerSnapshot(BaseModel):
    """Public attributes of a player captured when they were muted.

    Extra attributes are kept as-is so a persisted list round-trips exactly.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: Annotated[int, Field(strict=True)]
    name: Annotated[str, Field(strict=True)]

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


@dataclass(frozen=True)
class MutedEntry:
    identity_token: str
    snapshot: PlayerSnapshot

    def __post_init__(self) -> None:
        if not self.identity_token: raise ValueError("identity_token cannot be empty")

    @property
    def name(self) -> str:
        return self.snapshot.name
