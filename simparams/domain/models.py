from enum import Enum
from typing import Generic, TypeVar
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

V = TypeVar("V")

class CardinalDirection(str, Enum):
    NORTH = "NORTH"
    EAST = "EAST"
    SOUTH = "SOUTH"
    WEST = "WEST"

class TurnDirection(str, Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    STRAIGHT = "STRAIGHT"
    U_TURN = "U_TURN" # 180 degree turn back onto the same road

class LightStatus(str, Enum):
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"

class NumericRange(BaseModel):
    """Closed interval [lower_bound, upper_bound]."""
    model_config = ConfigDict(frozen=True)

    lower_bound: float
    upper_bound: float

    @field_validator("lower_bound", "upper_bound", mode="before")
    @classmethod
    def reject_bool(cls, v):
        # bool is an int subclass and would otherwise coerce to 0.0 / 1.0
        if isinstance(v, bool):
            raise ValueError("bounds must be numbers, not booleans")
        return v

    @model_validator(mode="after")
    def check_order(self) -> "NumericRange":
        # Written as a negation so NaN bounds are rejected too
        if not self.lower_bound <= self.upper_bound:
            raise ValueError(
                f"lower_bound {self.lower_bound} must not exceed upper_bound {self.upper_bound}"
            )
        return self

    def contains(self, x: float) -> bool:
        return self.lower_bound <= x <= self.upper_bound

class RangeTableEntry(BaseModel, Generic[V]):
    model_config = ConfigDict(frozen=True)

    interval: NumericRange
    value: V
