"""ISO-8601 timestamp formatting.

All timestamps on the wire are ISO-8601 in UTC with fractional seconds, both
in request bodies and in every model field typed as a date. The formatter is
an immutable value: the client owns one and threads it through encoding and
decoding instead of relying on shared mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime


@dataclass(frozen=True)
class ISO8601Formatter:
    """Encodes and decodes ISO-8601 timestamps.

    Attributes:
        fractional_digits: Digits of sub-second precision written by encode (1-6)
        require_fraction: Reject timestamps without a fractional part on decode
    """

    fractional_digits: int = 6
    require_fraction: bool = False

    def __post_init__(self) -> None:
        if not 1 <= self.fractional_digits <= 6:
            raise ValueError("fractional_digits must be between 1 and 6")

    def encode(self, value: datetime) -> str:
        """Format a datetime as UTC ISO-8601 with fractional seconds.

        Naive datetimes are taken to be UTC already.
        """
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        value = value.astimezone(UTC)
        fraction = f"{value.microsecond:06d}"[: self.fractional_digits]
        return f"{value:%Y-%m-%dT%H:%M:%S}.{fraction}Z"

    def decode(self, value: str) -> datetime:
        """Parse an ISO-8601 timestamp into an aware UTC datetime.

        Raises:
            ValueError: If the string is not a supported ISO-8601 timestamp
        """
        text = value.strip()
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise ValueError(f"Expected date string to be ISO8601-formatted, got {value!r}") from e
        if parsed.tzinfo is None:
            raise ValueError(f"Expected a UTC offset in {value!r}")

        _, _, time_part = text.partition("T")
        if self.require_fraction and "." not in time_part and "," not in time_part:
            raise ValueError(f"Expected fractional seconds in {value!r}")

        return parsed.astimezone(UTC)


DEFAULT_FORMATTER = ISO8601Formatter()
