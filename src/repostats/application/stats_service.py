"""Statistics service - handles a user's request for repository stats"""

import logging
from typing import List, Optional

from repostats.domain.aggregator import Aggregator, AggregatorFactory
from repostats.domain.errors import MissingInput, RepoStatsError
from repostats.domain.models.category_stat import CategoryStat
from repostats.domain.models.stats_state import StatsState
from repostats.domain.path_filter import PathFilter
from repostats.infrastructure.github.client import GitHubClient

logger = logging.getLogger(__name__)

SORT_KEYS = {
    "bytes": lambda stat: (-stat.bytes, stat.category),
    "name": lambda stat: stat.category,
}


def sort_stats(stats: List[CategoryStat], order: str = "bytes") -> List[CategoryStat]:
    """Order statistics for display ("none" keeps aggregation order)"""
    key = SORT_KEYS.get(order)
    if key is None:
        return list(stats)
    return sorted(stats, key=key)


class StatsService:
    """Service that fetches a repository and computes its statistics"""

    def __init__(
        self,
        github_client: GitHubClient,
        apply_ignore_to_languages: bool = False,
        sort: str = "bytes",
    ):
        """Initialize stats service

        Args:
            github_client: GitHub API client
            apply_ignore_to_languages: Whether ignore rules apply in languages mode
            sort: Display order of the computed statistics
        """
        self.github_client = github_client
        self.apply_ignore_to_languages = apply_ignore_to_languages
        self.sort = sort

    def fetch_stats(self, state: StatsState) -> Optional[List[CategoryStat]]:
        """Fetch and aggregate statistics for the repository named in state

        Input, fetch and aggregation errors are recorded on the state, which
        is then left without statistics.

        Args:
            state: View state with username, repository, rules and mode

        Returns:
            The computed statistics, or None if the fetch failed
        """
        if state.loading:
            logger.warning("A fetch is already in progress, ignoring request")
            return None

        aggregator = AggregatorFactory.create(
            state.mode,
            ignore_rules=state.ignore_rules,
            apply_ignore_to_languages=self.apply_ignore_to_languages,
        )

        try:
            if not state.username or not state.repository:
                raise MissingInput()

            state.start_loading()
            stats = self._compute(state, aggregator)
        except RepoStatsError as e:
            logger.error(f"Could not compute statistics: {e}")
            state.fail(str(e))
            return None
        except Exception as e:
            logger.error(f"Unexpected error while computing statistics: {e}", exc_info=True)
            state.fail(f"Unexpected error: {e}")
            return None

        state.succeed(stats)
        logger.info(f"Computed {len(stats)} categories for {state.username}/{state.repository}")
        return stats

    def _compute(self, state: StatsState, aggregator: Aggregator) -> List[CategoryStat]:
        if state.mode == "languages":
            languages = self.github_client.get_languages(state.username, state.repository)
            state.files_total = 0
            state.files_ignored = 0
            return sort_stats(aggregator.aggregate(languages), self.sort)

        entries = self.github_client.get_tree(state.username, state.repository)
        blobs = [entry for entry in entries if entry.is_blob]
        _, ignored = PathFilter(state.ignore_rules).filter_entries(blobs)
        state.files_total = len(blobs)
        state.files_ignored = len(ignored)
        return sort_stats(aggregator.aggregate(entries), self.sort)
