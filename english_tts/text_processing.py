"""
English text processing for model input.

Two modes:
1. Pre-computed: filelists contain space-separated integer indices.
   Used during training (fastest, no G2P at runtime).
2. Runtime: English text → G2P → integer sequence.
   Used during inference.
"""

from typing import List, Optional

from .config import get_model_input_config
from .g2p import EnglishG2P
from .phonemes import ID_TO_PHONEME

# Singleton G2P instance
_g2p: Optional[EnglishG2P] = None


def get_g2p() -> EnglishG2P:
    global _g2p
    if _g2p is None:
        _g2p = EnglishG2P(config=get_model_input_config())
    return _g2p


def text_to_sequence(text: str) -> List[int]:
    """Convert English text to phoneme index sequence at runtime."""
    g2p = get_g2p()
    return g2p.text_to_indices(text)


def cleaned_text_to_sequence(text: str) -> List[int]:
    """Parse the indices column of a phoneme filelist line.

    setup_data.create_phoneme_filelist writes `id|indices` lines; this
    takes the part after the bar, e.g. "1 9 24 4".
    """
    return [int(x) for x in text.strip().split()]


def sequence_to_text(sequence: List[int]) -> str:
    """Render phoneme indices as space-separated IPA symbols; unknown ids print as "?"."""
    return " ".join(ID_TO_PHONEME.get(idx, "?") for idx in sequence)
