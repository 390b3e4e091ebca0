#!/usr/bin/env python3
"""
English Grapheme-to-Phoneme (G2P) Converter

Rule-based G2P using the letter-to-sound rules of NRL Report 7948.
English spelling is far from phonemic, so each letter is resolved by
the first rule whose match text and left/right contexts fit.

Pipeline:
  1. Fold accented letters to their base letter (é → e, ï → i),
     typographic quotes → ASCII, uppercase
  2. Split into runs of letters/apostrophes and runs of everything else
  3. Pad every run with one space on each side (the word-edge marker)
  4. Scan each padded run left to right: pick the bucket for the current
     character, take the first applicable rule, emit its phonemes and
     skip past its match text
  5. Output: list of IPA phoneme tokens with pause (" ") and silent ("")
     markers, in input order

The converter also provides `text_to_indices()` for direct model input.
"""

import re
import unicodedata
from dataclasses import dataclass
from typing import List, Optional, Union

from .config import G2PConfig, get_lexicon_config
from .phonemes import (
    PHONEME_TO_ID,
    ID_TO_PHONEME,
    VOCAB_SIZE,
    PAUSE,
    SILENT,
    UNK_TOKEN,
    SIL_TOKEN,
)
from .rules import RuleTable, get_rule_table, select_rule

import logging

logger = logging.getLogger(__name__)


# ── Text normalization ──────────────────────────────────────────────

_QUOTE_MAP = {
    "‘": "'",
    "’": "'",
    "ʼ": "'",
    "“": '"',
    "”": '"',
    "–": "-",
    "—": "-",
}

# Runs of letters/apostrophes, or runs of anything else
_TOKEN_RE = re.compile(r"[A-Z']+|[^A-Z']+")


@dataclass(frozen=True)
class UnknownSymbol:
    """A character for which no rule in its bucket applies."""

    char: str


WordOutput = List[Union[str, UnknownSymbol]]


def _fold_diacritics(text: str) -> str:
    # NFKD splits accented letters into base + combining marks (ï → i + \u0308)
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(c for c in decomposed if not unicodedata.category(c).startswith("M"))
    return unicodedata.normalize("NFC", base)


def normalize_text(text: str, fold_unicode: bool = True, quotes: bool = True) -> str:
    """Fold diacritics to base letters, ASCII quotes and dashes, uppercase."""
    if fold_unicode:
        text = _fold_diacritics(text)
    if quotes:
        text = "".join(_QUOTE_MAP.get(c, c) for c in text)
    return text.upper()


def tokenize(text: str) -> List[str]:
    """Split normalized text into letter runs and non-letter runs."""
    return _TOKEN_RE.findall(text)


def pad_word(run: str) -> str:
    return f" {run} "


# ── Word translation ────────────────────────────────────────────────

def translate_word(padded: str, table: Optional[RuleTable] = None) -> WordOutput:
    """
    Translate one padded run to phonemes.

    Args:
        padded: uppercased run with one boundary space on each side
        table: rule table (defaults to the shared English table)

    Returns:
        Phonemes in order, including PAUSE and SILENT markers, with an
        UnknownSymbol wherever no rule applied.
    """
    if len(padded) < 2 or padded[0] != " " or padded[-1] != " ":
        raise ValueError(f"Word must be padded with boundary spaces: {padded!r}")

    if table is None:
        table = get_rule_table()

    output: WordOutput = []
    index = 1
    end = len(padded) - 1

    while index < end:
        ch = padded[index]
        rule = select_rule(padded, index, table.bucket_for(ch))

        if rule is None:
            logger.debug(f"No rule for {ch!r} at {index} in {padded!r}")
            output.append(UnknownSymbol(ch))
            index += 1
            continue

        assert rule.match, f"Rule with empty match text: {rule!r}"
        output.extend(rule.output)
        index += len(rule.match)

    return output


class EnglishG2P:
    """
    English grapheme-to-phoneme converter.

    Usage:
        g2p = EnglishG2P()
        phonemes = g2p.text_to_phonemes("That quick beige fox")
        ipa      = g2p.text_to_ipa("That quick beige fox")
        indices  = g2p.text_to_indices("That quick beige fox")
    """

    def __init__(self, config: Optional[G2PConfig] = None, rule_table: Optional[RuleTable] = None):
        self.config = config or G2PConfig()
        self.rule_table = rule_table or get_rule_table()
        self.phoneme_to_id = PHONEME_TO_ID
        self.id_to_phoneme = ID_TO_PHONEME

    def get_vocab_size(self) -> int:
        return len(self.phoneme_to_id)

    def _render(self, items: WordOutput) -> List[str]:
        rendered: List[str] = []
        for item in items:
            if isinstance(item, UnknownSymbol):
                if self.config.log_unknown:
                    logger.warning(f"Unrecognized symbol: {item.char!r}")
                if self.config.unknown_policy == "literal":
                    rendered.append(item.char)
                elif self.config.unknown_policy == "placeholder":
                    rendered.append(self.config.placeholder)
                continue

            if item == SILENT and not self.config.keep_silent:
                continue
            rendered.append(item)
        return rendered

    def normalize(self, text: str) -> str:
        return normalize_text(
            text,
            fold_unicode=self.config.normalize_unicode,
            quotes=self.config.normalize_quotes,
        )

    def word_to_phonemes(self, word: str) -> List[str]:
        """Convert a single word (no surrounding whitespace needed)."""
        phonemes: List[str] = []
        for run in tokenize(self.normalize(word.strip())):
            phonemes.extend(self._render(translate_word(pad_word(run), self.rule_table)))
        return phonemes

    def text_to_phonemes(self, text: str) -> List[str]:
        """
        Convert English text to a flat list of IPA phoneme tokens.

        Spaces and sentence punctuation come out as PAUSE tokens, so
        whitespace-only text still yields pauses. With add_sil_tokens, a <sil> token frames the utterance.
        """
        if not text:
            return []

        phonemes: List[str] = [SIL_TOKEN] if self.config.add_sil_tokens else []

        for run in tokenize(self.normalize(text)):
            phonemes.extend(self._render(translate_word(pad_word(run), self.rule_table)))

        if self.config.add_sil_tokens:
            phonemes.append(SIL_TOKEN)
        return phonemes

    def text_to_ipa(self, text: str) -> str:
        """Convert English text to a single IPA string."""
        return "".join(self.text_to_phonemes(text))

    def text_to_indices(self, text: str) -> List[int]:
        """Convert English text to a list of phoneme integer indices."""
        phonemes = self.text_to_phonemes(text)
        indices = []
        for ph in phonemes:
            if ph == SILENT:
                continue
            if ph in self.phoneme_to_id:
                indices.append(self.phoneme_to_id[ph])
            else:
                logger.warning(f"Unknown phoneme: {ph!r}, using <unk>")
                indices.append(self.phoneme_to_id[UNK_TOKEN])
        return indices

    def indices_to_phonemes(self, indices: List[int]) -> List[str]:
        """Convert phoneme indices back to phoneme strings."""
        return [self.id_to_phoneme.get(idx, UNK_TOKEN) for idx in indices]

    def process_text(self, text: str) -> List[List[str]]:
        """Compatibility method: returns [[phonemes]]."""
        phonemes = self.text_to_phonemes(text)
        return [phonemes] if phonemes else [[]]

    def to_dict(self) -> dict:
        """Serialize processor state."""
        return {
            "phoneme_to_id": self.phoneme_to_id,
            "id_to_phoneme": self.id_to_phoneme,
            "config": self.config.to_dict(),
            "processor_type": "english_nrl_g2p",
        }

    @classmethod
    def from_dict(cls, state_dict: dict) -> "EnglishG2P":
        """Restore processor from serialized state."""
        config = None
        if "config" in state_dict:
            config = G2PConfig.from_dict(state_dict["config"])
        g2p = cls(config=config)
        if "phoneme_to_id" in state_dict:
            g2p.phoneme_to_id = state_dict["phoneme_to_id"]
            g2p.id_to_phoneme = {v: k for k, v in g2p.phoneme_to_id.items()}
        return g2p


# ── Pronunciation Dictionary Generation ─────────────────────────────

def generate_pronunciation_dictionary(word_list: List[str], output_path: str) -> int:
    """
    Generate an MFA-compatible pronunciation dictionary from a word list.

    Each line: WORD\tPHONEME1 PHONEME2 ...
    (tab-separated, phonemes space-separated, no pauses or silences)

    Args:
        word_list: list of English words
        output_path: path to write the dictionary file

    Returns:
        Number of entries written.
    """
    g2p = EnglishG2P(config=get_lexicon_config())
    seen = set()
    written = 0

    with open(output_path, "w", encoding="utf-8") as f:
        for word in sorted(set(word_list)):
            word_lower = word.strip().lower()
            if word_lower in seen or not word_lower:
                continue
            seen.add(word_lower)

            phonemes = [p for p in g2p.word_to_phonemes(word_lower) if p != PAUSE]
            if phonemes:
                f.write(f"{word_lower}\t{' '.join(phonemes)}\n")
                written += 1

    return written


if __name__ == "__main__":
    g2p = EnglishG2P()

    test_sentences = [
        "That quick beige fox jumped in the air over each thin dog.",
        "Look out, I shout, for he's foiled you again, creating chaos.",
        "Are those shy Eurasian footwear, cowboy chaps, or jolly earthmoving headgear?",
        "The hungry purple dinosaur ate the kind, zingy fox.",
        "Shaw, those twelve beige hooks are joined if I patch a young, gooey mouth.",
    ]

    print("=" * 70)
    print("English G2P Test")
    print("=" * 70)

    for sentence in test_sentences:
        ipa = g2p.text_to_ipa(sentence)
        indices = g2p.text_to_indices(sentence)
        print(f"\nText:     {sentence}")
        print(f"IPA:      {ipa}")
        print(f"Indices:  {indices[:30]}{'...' if len(indices) > 30 else ''}")

    print(f"\nVocabulary size: {VOCAB_SIZE}")
