"""Error types raised while decoding lsblk snapshots."""
from typing import Any, Optional


class BlockviewError(Exception):
    """Base class for all blockview errors."""
    pass


class MalformedDocument(BlockviewError, ValueError):
    """Raised when a snapshot is not valid JSON or has the wrong shape."""
    pass


class MalformedScalar(BlockviewError, ValueError):
    """Raised when a single field cannot be decoded.

    Attributes:
        key: External lsblk key of the field (None when decoded standalone)
        raw: The offending raw value as found in the document
    """

    def __init__(self, key: Optional[str], raw: Any, reason: str = "invalid value"):
        self.key = key
        self.raw = raw
        self.reason = reason
        where = f"field '{key}'" if key else "value"
        super().__init__(f"Malformed {where}: {raw!r} ({reason})")
