from datetime import datetime, timezone
from typing import Optional


def format_timestamp(value: Optional[datetime]) -> str:
    """Format as YYYY-MM-DDTHH:MM:SSZ; a missing value becomes the zero time."""
    if value is None:
        value = datetime.min
    elif value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.replace(tzinfo=None, microsecond=0).isoformat() + "Z"
