from typing import Any


class SimParamsError(Exception):
    """Base class for errors raised by the parameter tables."""


class RangeNotFound(SimParamsError, LookupError):
    """No interval of a range table contains the queried value."""

    def __init__(self, value: float, table_name: str):
        self.value = value
        self.table_name = table_name
        super().__init__(f"No entry of '{table_name}' covers the value {value!r}")


class InvalidRangeDefinition(SimParamsError, ValueError):
    """A range table entry does not describe a valid closed interval."""

    def __init__(self, table_name: str, index: int, lower_bound: Any, upper_bound: Any):
        self.table_name = table_name
        self.index = index
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
        super().__init__(
            f"Entry {index} of '{table_name}' has an invalid range "
            f"[{lower_bound!r}, {upper_bound!r}]"
        )
