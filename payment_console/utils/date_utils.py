"""Date manipulation utilities"""

from datetime import datetime, timezone


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp from the gateway into an aware datetime.

    Accepts a trailing "Z"; naive values are taken as UTC so that any two
    parsed timestamps can be compared.

    Raises:
        ValueError: If the value is not an ISO-8601 string
    """
    if not isinstance(value, str):
        raise ValueError(f"Timestamp must be an ISO-8601 string, got {type(value).__name__}")
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
