#!/usr/bin/env python3
"""
Rule records, the rule table and rule selection.

The table holds 27 immutable buckets: bucket 0 for punctuation and
whitespace, buckets 1-26 for the letters A-Z. A bucket is an ordered
tuple of rules closed by a single fallback rule; reaching the fallback
means no rule applies at that position.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .context import left_match, right_match, validate_pattern
from .phonemes import SILENT, UNKNOWN

logger = logging.getLogger(__name__)

NUM_BUCKETS = 27


@dataclass(frozen=True)
class Rule:
    """One letter-to-sound rule: left context, match text, right context, output."""

    left: str
    match: str
    right: str
    output: Tuple[str, ...]
    fallback: bool = False


Bucket = Tuple[Rule, ...]

FALLBACK_RULE = Rule("", UNKNOWN, "", (SILENT,), fallback=True)


def bucket_index(ch: str) -> int:
    """Bucket number for a buffer character: 1-26 for A-Z, 0 otherwise."""
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 1
    return 0


def _build_bucket(number: int, raw_bucket) -> Bucket:
    rules = []
    for position, (left, match, right, output) in enumerate(raw_bucket):
        if match == UNKNOWN:
            if position != len(raw_bucket) - 1:
                raise ValueError(
                    f"Bucket {number}: fallback rule must be last "
                    f"(found at position {position})"
                )
            rules.append(Rule(left, match, right, tuple(output), fallback=True))
            continue

        if not match:
            raise ValueError(f"Bucket {number}: empty match text at position {position}")
        if number and bucket_index(match[0]) != number:
            raise ValueError(
                f"Bucket {number}: match text {match!r} does not start with "
                f"{chr(ord('A') + number - 1)!r}"
            )

        validate_pattern(left, "left")
        validate_pattern(right, "right")
        rules.append(Rule(left, match, right, tuple(output)))

    if not rules or not rules[-1].fallback:
        rules.append(FALLBACK_RULE)

    return tuple(rules)


class RuleTable:
    """
    Immutable, ordered rule buckets.

    Usage:
        table = RuleTable.from_raw(ENGLISH_RULES)
        bucket = table.bucket_for("A")
    """

    def __init__(self, buckets: Sequence[Bucket]):
        if len(buckets) != NUM_BUCKETS:
            raise ValueError(f"Expected {NUM_BUCKETS} rule buckets, got {len(buckets)}")
        self._buckets: Tuple[Bucket, ...] = tuple(tuple(b) for b in buckets)

    @classmethod
    def from_raw(cls, raw_buckets: Sequence) -> "RuleTable":
        """
        Build and validate a table from (left, match, right, output) tuples.

        Raises:
            MalformedPatternError: a context pattern uses an unknown symbol
            ValueError: the bucket layout is inconsistent
        """
        if len(raw_buckets) != NUM_BUCKETS:
            raise ValueError(f"Expected {NUM_BUCKETS} rule buckets, got {len(raw_buckets)}")
        buckets = [_build_bucket(i, raw) for i, raw in enumerate(raw_buckets)]
        table = cls(buckets)
        logger.debug(f"Loaded rule table: {table.num_rules} rules in {NUM_BUCKETS} buckets")
        return table

    @property
    def buckets(self) -> Tuple[Bucket, ...]:
        return self._buckets

    @property
    def num_rules(self) -> int:
        return sum(len(b) for b in self._buckets)

    def bucket_for(self, ch: str) -> Bucket:
        return self._buckets[bucket_index(ch)]

    def __len__(self) -> int:
        return len(self._buckets)

    def __getitem__(self, number: int) -> Bucket:
        return self._buckets[number]


def select_rule(buffer: str, index: int, bucket: Bucket) -> Optional[Rule]:
    """
    Find the first rule in ``bucket`` that applies at ``buffer[index]``.

    Rules are tried in declared order; the first one whose match text
    occurs at ``index`` and whose left and right contexts both hold
    wins. There is no scoring and no longest-match tie-break.

    Returns:
        The winning rule, or None when the bucket's fallback is reached.
    """
    for rule in bucket:
        if rule.fallback:
            return None

        end = index + len(rule.match)
        if buffer[index:end] != rule.match:
            continue
        if not left_match(rule.left, buffer, index - 1):
            continue
        if not right_match(rule.right, buffer, end):
            continue
        return rule

    return None


# Process-wide table, built on first use
_table: Optional[RuleTable] = None


def get_rule_table() -> RuleTable:
    """Return the shared English rule table, loading it once."""
    global _table
    if _table is None:
        from .english_rules import ENGLISH_RULES

        _table = RuleTable.from_raw(ENGLISH_RULES)
    return _table
