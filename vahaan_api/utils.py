"""
Utility functions for timestamps and number formatting.
"""
from datetime import datetime, timezone
from typing import Optional, Union


def now_iso() -> str:
    """Return current UTC timestamp in ISO format, e.g. 2024-05-01T10:00:00.000Z."""
    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def format_grouped(value: Optional[Union[int, float]]) -> Optional[str]:
    """
    Format a number with thousands separators the way en-US locales do.

    Integral values print without decimals, others keep up to three
    fraction digits. Returns None when there is no value to format.
    """
    if value is None:
        return None
    if float(value).is_integer():
        return f"{int(value):,}"
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text
