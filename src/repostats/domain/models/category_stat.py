"""CategoryStat model - share of a repository taken by one category"""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class CategoryStat:
    """Aggregated byte count for a file extension or language"""

    category: str  # Extension (tree mode) or language name (languages mode)
    bytes: int
    percentage: str  # Fixed two-digit decimal, e.g. "37.50"

    @property
    def kilobytes(self) -> float:
        return self.bytes / 1024

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
