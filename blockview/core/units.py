"""Human-readable byte counts."""

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

SI_UNITS = "kMGTPE"
IEC_UNITS = "KMGTPE"


def _format(num_bytes: int, unit: int, letters: str, suffix: str) -> str:
    if not INT64_MIN <= num_bytes <= INT64_MAX:
        raise ValueError(f"Byte count out of int64 range: {num_bytes}")

    # Negative counts fall through here unscaled
    if num_bytes < unit:
        return f"{num_bytes}B"

    div, exp = unit, 0
    n = num_bytes // unit
    while n >= unit:
        div *= unit
        exp += 1
        n //= unit

    return f"{num_bytes / div:.1f}{letters[exp]}{suffix}"


def format_si(num_bytes: int) -> str:
    """Format a byte count with decimal units, e.g. 1500 -> '1.5kB'."""
    return _format(num_bytes, 1000, SI_UNITS, "B")


def format_iec(num_bytes: int) -> str:
    """Format a byte count with binary units, e.g. 1536 -> '1.5KiB'."""
    return _format(num_bytes, 1024, IEC_UNITS, "iB")


def format_size(num_bytes: int, units: str = "si") -> str:
    """Format a byte count in the requested unit system ('si' or 'iec')."""
    if units == "si":
        return format_si(num_bytes)
    if units == "iec":
        return format_iec(num_bytes)
    raise ValueError(f"Unknown unit system: {units!r} (expected 'si' or 'iec')")
