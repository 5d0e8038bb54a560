"""Time utilities for report stamps."""

from datetime import datetime
from typing import Optional

# Same shape as a browser's en-US toLocaleString(): 10/19/2026, 02:05:09 PM
GENERATED_FORMAT = "%m/%d/%Y, %I:%M:%S %p"


def now_local() -> datetime:
    """Current local time as an aware datetime."""
    return datetime.now().astimezone()


def format_generated(dt: Optional[datetime] = None) -> str:
    """Format a 'Generated:' timestamp; defaults to now."""
    if dt is None:
        dt = now_local()
    return dt.strftime(GENERATED_FORMAT)
