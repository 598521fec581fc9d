"""Byte aggregation strategies

Both strategies turn raw byte counts into ``CategoryStat`` lists with
percentages of the overall total:

* ``ExtensionAggregator`` groups tree blobs by file extension
* ``LanguageAggregator`` takes the language listing reported by GitHub
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping

from repostats.domain.errors import EmptyAggregation
from repostats.domain.models.category_stat import CategoryStat
from repostats.domain.models.file_entry import FileEntry
from repostats.domain.path_filter import should_include

logger = logging.getLogger(__name__)


def file_extension(path: str) -> str:
    """Return the lower-cased text after the last dot, or '' if there is none"""
    parts = path.split(".")
    return parts[-1].lower() if len(parts) > 1 else ""


def build_category_stats(totals: Mapping[str, int]) -> List[CategoryStat]:
    """Compute percentages for per-category byte totals

    Args:
        totals: Bytes per category

    Returns:
        One CategoryStat per category, in mapping order

    Raises:
        EmptyAggregation: If the totals add up to zero bytes
    """
    total_bytes = sum(totals.values())
    if total_bytes == 0:
        raise EmptyAggregation()

    return [
        CategoryStat(
            category=category,
            bytes=size,
            percentage=f"{size / total_bytes * 100:.2f}",
        )
        for category, size in totals.items()
    ]


class Aggregator(ABC):
    """Abstract base class for aggregation strategies"""

    @abstractmethod
    def aggregate(self, data: Any) -> List[CategoryStat]:
        """Aggregate fetched data into category statistics

        Args:
            data: Strategy-specific input (tree entries or language mapping)

        Returns:
            List of category statistics

        Raises:
            EmptyAggregation: If no bytes remain to aggregate
        """
        pass


class ExtensionAggregator(Aggregator):
    """Groups blob sizes by file extension, honoring ignore rules"""

    def __init__(self, ignore_rules: Iterable[str] = None):
        self.ignore_rules = frozenset(ignore_rules or ())

    def aggregate(self, entries: Iterable[FileEntry]) -> List[CategoryStat]:
        totals: Dict[str, int] = {}
        for entry in entries:
            if not entry.is_blob or not should_include(entry.path, self.ignore_rules):
                continue
            ext = file_extension(entry.path)
            if not ext:
                continue
            totals[ext] = totals.get(ext, 0) + entry.size_bytes

        logger.debug(f"Aggregated {len(totals)} extensions")
        return build_category_stats(totals)


class LanguageAggregator(Aggregator):
    """Uses the per-language byte counts reported by the API"""

    def __init__(self, ignore_rules: Iterable[str] = None, apply_ignore: bool = False):
        """Initialize language aggregator

        Args:
            ignore_rules: Ignore rules, matched against language names
            apply_ignore: Whether ignore rules apply at all (off by default)
        """
        self.ignore_rules = frozenset(ignore_rules or ())
        self.apply_ignore = apply_ignore

    def aggregate(self, language_bytes: Mapping[str, int]) -> List[CategoryStat]:
        totals = dict(language_bytes)
        if self.apply_ignore:
            totals = {
                language: size
                for language, size in totals.items()
                if should_include(language, self.ignore_rules)
            }
        return build_category_stats(totals)


class AggregatorFactory:
    """Factory for creating aggregation strategies"""

    STRATEGIES = {
        "tree": ExtensionAggregator,
        "languages": LanguageAggregator,
    }

    @classmethod
    def create(
        cls,
        mode: str,
        ignore_rules: Iterable[str] = None,
        apply_ignore_to_languages: bool = False,
    ) -> Aggregator:
        """Create aggregator for a mode

        Args:
            mode: Aggregation mode (tree or languages)
            ignore_rules: Active ignore rules
            apply_ignore_to_languages: Apply ignore rules in languages mode

        Returns:
            Aggregator instance

        Raises:
            ValueError: If mode is not supported
        """
        mode_lower = mode.lower()

        if mode_lower not in cls.STRATEGIES:
            available = ", ".join(cls.STRATEGIES.keys())
            raise ValueError(f"Unknown aggregation mode: {mode}. Available modes: {available}")

        logger.debug(f"Creating {mode_lower} aggregator")
        if mode_lower == "languages":
            return LanguageAggregator(ignore_rules, apply_ignore=apply_ignore_to_languages)
        return ExtensionAggregator(ignore_rules)
