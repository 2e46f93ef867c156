"""
Player models for fantasy football analysis.

Players come from the Sleeper player directory and are immutable once
fetched; the directory is refreshed wholesale rather than patched.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Position(str, Enum):
    """NFL player positions for fantasy football."""
    QB = "QB"
    RB = "RB"
    WR = "WR"
    TE = "TE"
    K = "K"
    DEF = "DEF"


class InjuryStatus(str, Enum):
    """Player injury status designations."""
    ACTIVE = "active"
    QUESTIONABLE = "Questionable"
    DOUBTFUL = "Doubtful"
    OUT = "Out"
    IR = "IR"


_POSITION_VALUES = {p.value for p in Position}
_INJURY_VALUES = {s.value: s for s in InjuryStatus}


class Player(BaseModel):
    """A player record from the Sleeper directory."""

    player_id: str = Field(..., min_length=1)
    first_name: str = ""
    last_name: str = ""
    position: Optional[Position] = Field(None, description="None when outside the six fantasy buckets")
    team: Optional[str] = None
    # Unrecognised upstream designations (PUP, Sus, NA...) are kept verbatim
    injury_status: Union[InjuryStatus, str] = InjuryStatus.ACTIVE
    active: bool = True

    model_config = ConfigDict(frozen=True)

    @field_validator("position", mode="before")
    @classmethod
    def coerce_position(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        value = str(v).upper()
        return value if value in _POSITION_VALUES else None

    @field_validator("injury_status", mode="before")
    @classmethod
    def coerce_injury_status(cls, v: Any) -> Union[InjuryStatus, str]:
        if v is None or v == "":
            return InjuryStatus.ACTIVE
        return _INJURY_VALUES.get(v, v)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_healthy(self) -> bool:
        """True when the player carries no injury designation."""
        return self.injury_status == InjuryStatus.ACTIVE

    @property
    def is_unavailable(self) -> bool:
        """Out or on injured reserve."""
        return self.injury_status in (InjuryStatus.OUT, InjuryStatus.IR)

    @property
    def status_label(self) -> str:
        status = self.injury_status
        return status.value if isinstance(status, InjuryStatus) else str(status)

    def display_name(self) -> str:
        """Name with position and team, e.g. ``Josh Allen (QB - BUF)``."""
        position = self.position.value if self.position else "N/A"
        return f"{self.full_name} ({position} - {self.team or 'FA'})"
