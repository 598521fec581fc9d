"""StatsState model - everything a fetch reads and writes"""

from dataclasses import dataclass, field
from typing import List, Optional, Set

from repostats.domain.models.category_stat import CategoryStat


@dataclass
class StatsState:
    """State of one statistics view

    Passed explicitly through the service so that filtering and
    aggregation stay pure.
    """

    username: str = ""
    repository: str = ""
    ignore_rules: Set[str] = field(default_factory=set)
    mode: str = "tree"
    loading: bool = False
    stats: Optional[List[CategoryStat]] = None
    error: Optional[str] = None
    files_total: int = 0
    files_ignored: int = 0

    def toggle_ignore(self, rule: str) -> None:
        """Add rule to the ignore list, or remove it if already present"""
        if rule in self.ignore_rules:
            self.ignore_rules.discard(rule)
        else:
            self.ignore_rules.add(rule)

    def start_loading(self) -> None:
        self.error = None
        self.loading = True

    def fail(self, message: str) -> None:
        """Record a terminal error; stale statistics are dropped"""
        self.error = message
        self.stats = None
        self.loading = False

    def succeed(self, stats: List[CategoryStat]) -> None:
        self.stats = stats
        self.error = None
        self.loading = False

    @property
    def total_bytes(self) -> int:
        return sum(stat.bytes for stat in self.stats or [])
