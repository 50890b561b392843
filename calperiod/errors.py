"""Exceptions raised by period constructors and operations."""


class PeriodError(ValueError):
    """Base class for expected domain violations on periods."""


class OutOfRangeError(PeriodError):
    """A calendar unit index fell outside its valid bound."""

    def __init__(self, unit: str, value: int, minimum: int, maximum: int):
        self.unit: str = unit
        self.value: int = value
        self.minimum: int = minimum
        self.maximum: int = maximum
        super().__init__(
            f"{unit} must be between {minimum} and {maximum}, got {value}"
        )


class MustOverlapError(PeriodError):
    """The operation requires two periods that overlap."""


class AbutsError(PeriodError):
    """The operation is undefined for two periods that abut."""
