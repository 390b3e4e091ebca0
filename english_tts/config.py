#!/usr/bin/env python3
"""
Front-end Configuration for English TTS

Controls how the letter-to-sound front end renders its output:
  - what happens to characters no rule covers (drop / literal / placeholder)
  - whether silent markers and utterance-boundary tokens are emitted
  - text normalization before rule matching
"""

import logging
import os
from dataclasses import dataclass, field

from .phonemes import UNK_TOKEN

logger = logging.getLogger(__name__)

UNKNOWN_POLICIES = ("drop", "literal", "placeholder")


@dataclass
class G2PConfig:
    """Rendering options for EnglishG2P."""

    # Characters without a matching rule: "drop", "literal" or "placeholder"
    unknown_policy: str = field(
        default_factory=lambda: os.environ.get("ENGLISH_TTS_UNKNOWN_POLICY", "drop")
    )
    placeholder: str = UNK_TOKEN

    # Output shape
    keep_silent: bool = True
    add_sil_tokens: bool = False

    # Normalization
    normalize_unicode: bool = True
    normalize_quotes: bool = True

    # Report every character that falls through to the fallback rule
    log_unknown: bool = True

    def __post_init__(self):
        self.unknown_policy = self.unknown_policy.strip().lower()
        if self.unknown_policy not in UNKNOWN_POLICIES:
            raise ValueError(
                f"unknown_policy must be one of {UNKNOWN_POLICIES}, "
                f"got {self.unknown_policy!r}"
            )
        if self.unknown_policy == "placeholder" and not self.placeholder:
            raise ValueError("placeholder policy needs a non-empty placeholder token")

        if not os.environ.get("TESTING"):
            self._log_config()

    def _log_config(self):
        logger.debug(
            "G2P config: unknown_policy=%s placeholder=%r keep_silent=%s "
            "add_sil_tokens=%s normalize_unicode=%s normalize_quotes=%s",
            self.unknown_policy,
            self.placeholder,
            self.keep_silent,
            self.add_sil_tokens,
            self.normalize_unicode,
            self.normalize_quotes,
        )

    def to_dict(self) -> dict:
        return {k: v for k, v in self.__dict__.items() if not k.startswith("_")}

    @classmethod
    def from_dict(cls, d: dict) -> "G2PConfig":
        return cls(**d)


def get_default_config() -> G2PConfig:
    return G2PConfig()


def get_model_input_config() -> G2PConfig:
    """Model input: unknown characters map to <unk>, utterances framed by <sil>."""
    return G2PConfig(
        unknown_policy="placeholder",
        keep_silent=False,
        add_sil_tokens=True,
    )


def get_lexicon_config() -> G2PConfig:
    """Pronunciation dictionaries: phonemes only, nothing structural."""
    return G2PConfig(
        unknown_policy="drop",
        keep_silent=False,
        log_unknown=False,
    )


def get_debug_config() -> G2PConfig:
    """Pass unmatched characters through so they stay visible in the output."""
    return G2PConfig(unknown_policy="literal")
