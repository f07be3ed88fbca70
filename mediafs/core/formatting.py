"""Human-readable formatting of numbers, rates, durations and sizes.

``None`` stands for an unset value and renders as ``"unset"``. For limits,
zero means no limit and renders as ``"unlimited"``.
"""

from typing import Optional

UNSET = "unset"
UNLIMITED = "unlimited"

TIME_BASE = 1_000_000  # duration ticks per second (microseconds)

KB = 1024
MB = KB * 1024
GB = MB * 1024
TB = GB * 1024


def format_number(value: Optional[int]) -> str:
    if value is None:
        return UNSET
    if not value:
        return UNLIMITED
    return str(value)


def format_bitrate(value: Optional[int]) -> str:
    """Format a bit rate in bps, kbps or Mbps."""
    if value is None:
        return UNSET
    if value > 1_000_000:
        return f"{value / 1_000_000:.2f} Mbps"
    if value > 1000:
        return f"{value / 1000:.1f} kbps"
    return f"{value} bps"


def format_samplerate(value: Optional[int]) -> str:
    """Format a sample rate in Hz or kHz."""
    if value is None:
        return UNSET
    if value < 1000:
        return f"{value} Hz"
    return f"{value / 1000:.3f} kHz"


def format_duration(value: Optional[int], fracs: int = 1) -> str:
    """
    Format a duration as [HH:]MM:SS[.f]

    Args:
        value: Duration in microseconds
        fracs: Number of fractional second digits to show, 0 for none

    Returns:
        Formatted duration, hours only shown when non-zero
    """
    if value is None:
        return UNSET

    seconds_total = value // TIME_BASE
    hours = seconds_total // 3600
    mins = (seconds_total % 3600) // 60
    secs = seconds_total % 60

    buffer = f"{hours:02d}:" if hours else ""
    buffer += f"{mins:02d}:{secs:02d}"
    if fracs:
        decimals = f"{value % TIME_BASE:06d}"
        buffer += "." + decimals[:fracs]
    return buffer


def format_time(value: Optional[int]) -> str:
    """
    Format a period in seconds as weeks, days, hours, minutes and seconds.

    Zero components are omitted; every component is followed by a space,
    e.g. ``"1w 2h 5s "``.
    """
    if value is None:
        return UNSET
    if not value:
        return UNLIMITED

    weeks, value = divmod(value, 60 * 60 * 24 * 7)
    days, value = divmod(value, 60 * 60 * 24)
    hours, value = divmod(value, 60 * 60)
    mins, secs = divmod(value, 60)

    buffer = ""
    for amount, unit in ((weeks, "w"), (days, "d"), (hours, "h"), (mins, "m"), (secs, "s")):
        if amount:
            buffer += f"{amount}{unit} "
    return buffer


def format_size(value: Optional[int]) -> str:
    """Format a byte count in bytes, KB, MB, GB or TB."""
    if value is None:
        return UNSET
    if not value:
        return UNLIMITED

    if value > TB:
        return f"{value / TB:.3f} TB"
    if value > GB:
        return f"{value / GB:.2f} GB"
    if value > MB:
        return f"{value / MB:.1f} MB"
    if value > KB:
        return f"{value / KB:.1f} KB"
    return f"{value} bytes"


def format_size_ex(value: Optional[int]) -> str:
    """Format a byte count with the exact byte count appended."""
    return f"{format_size(value)} ({value if value is not None else 0} bytes)"
