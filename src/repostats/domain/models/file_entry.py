"""FileEntry model - represents one item of a repository tree"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class EntryKind(str, Enum):
    """Kind of a git tree entry"""

    BLOB = "blob"
    TREE = "tree"
    COMMIT = "commit"  # submodule


@dataclass(frozen=True)
class FileEntry:
    """Represents a file or directory listed in a repository tree"""

    path: str  # Path relative to the repository root
    size_bytes: int = 0  # Only meaningful for blobs
    kind: EntryKind = EntryKind.BLOB

    def __post_init__(self):
        """Validate entry data"""
        if self.size_bytes < 0:
            raise ValueError("Size must be >= 0")

    @property
    def is_blob(self) -> bool:
        """Check if entry is a file"""
        return self.kind == EntryKind.BLOB

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "FileEntry":
        """Build entry from a GitHub tree API item

        Args:
            item: Tree item with at least ``path`` and ``type``

        Returns:
            FileEntry instance
        """
        return cls(
            path=item["path"],
            size_bytes=int(item.get("size") or 0),
            kind=EntryKind(item.get("type", "blob")),
        )
