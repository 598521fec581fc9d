"""Ignore-rule matching for repository paths

A rule's first character selects how it matches:

* ``.md``    - suffix of the whole path (``README.md``, ``docs/a.md``)
* ``/build`` - a folder: ``build``, ``build/...`` or ``.../build``
* ``dist``   - same as a folder rule, without the slash

Matching is case-sensitive and paths are never normalized.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from repostats.domain.models.file_entry import FileEntry

logger = logging.getLogger(__name__)


def _segment_match(path: str, name: str) -> bool:
    return path == name or path.startswith(name + "/") or path.endswith("/" + name)


def rule_matches(path: str, rule: str) -> bool:
    """Check if a single ignore rule excludes path"""
    if rule.startswith("."):
        return path.endswith(rule)
    if rule.startswith("/"):
        return _segment_match(path, rule[1:])
    return _segment_match(path, rule)


def should_include(path: str, ignore_rules: Iterable[str]) -> bool:
    """Check that no ignore rule excludes path

    Args:
        path: Repository-relative path
        ignore_rules: Active ignore rules

    Returns:
        True if the path survives every rule
    """
    return not any(rule_matches(path, rule) for rule in ignore_rules)


class PathFilter:
    """Filter for tree entries based on ignore rules"""

    def __init__(self, ignore_rules: Iterable[str] = None):
        self.ignore_rules = frozenset(ignore_rules or ())

    def matching_rule(self, path: str) -> Optional[str]:
        """Return the first rule (sorted) that excludes path, or None"""
        for rule in sorted(self.ignore_rules):
            if rule_matches(path, rule):
                return rule
        return None

    def should_include(self, path: str) -> bool:
        return should_include(path, self.ignore_rules)

    def filter_entries(
        self, entries: Iterable[FileEntry]
    ) -> Tuple[List[FileEntry], List[Tuple[FileEntry, str]]]:
        """Split entries into included and ignored ones

        Args:
            entries: Tree entries to filter

        Returns:
            Tuple of (included_entries, ignored_entries_with_reasons)
        """
        included = []
        ignored = []

        for entry in entries:
            rule = self.matching_rule(entry.path)
            if rule is None:
                included.append(entry)
            else:
                ignored.append((entry, f"matches rule: {rule}"))
                logger.debug(f"Ignoring {entry.path}: matches rule {rule}")

        if ignored:
            logger.info(f"Filtered out {len(ignored)} entries, {len(included)} remaining")

        return included, ignored
