import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("TESTING", "1")

from english_tts.rules import NUM_BUCKETS, RuleTable, bucket_index


def build_table(rules_by_letter):
    """Rule table with only the given buckets populated.

    ``rules_by_letter`` maps a letter (or "" for punctuation) to a list of
    (left, match, right, output) tuples.
    """
    raw = [[] for _ in range(NUM_BUCKETS)]
    for key, rules in rules_by_letter.items():
        raw[bucket_index(key) if key else 0] = list(rules)
    return RuleTable.from_raw(raw)


@pytest.fixture
def make_table():
    return build_table
