#!/usr/bin/env python3
"""
English Phoneme Inventory and Vocabulary Mapping

Defines the 41-symbol English phoneme set (IPA) produced by the
letter-to-sound rules, the two structural markers (pause and silent),
and the integer vocabulary mapping used by a downstream TTS model.

The symbols are named after the ARPAbet codes of NRL Report 7948:

    IY  bEEt        IH  bIt         EY  gAte        EH  gEt
    AE  fAt         AA  fAther      AO  lAWn        OW  lOne
    UH  fUll        UW  fOOl        ER  mURdER      AX  About
    AH  bUt         AY  hIde        AW  hOW         OY  tOY

    P   Pack        B   Back        T   Time        D   Dime
    K   Coat        G   Goat        F   Fault       V   Vault
    TH  eTHer       DH  eiTHer      S   Sue         Z   Zoo
    SH  leaSH       ZH  leiSure     HH  How         M   suM
    N   suN         NG  suNG        L   Laugh       W   Wear
    Y   Young       R   Rate        CH  CHurch      JH  Jar
    WH  WHere

AY, AW, OY and WH need two characters for a standard IPA rendering.
"""

from typing import Dict, List


# ── Vowels ──────────────────────────────────────────────────────────

IY = "i"
IH = "ɪ"
EY = "e"
EH = "ɛ"
AE = "æ"
AA = "ɑ"
AO = "ɔ"
OW = "o"
UH = "ʊ"
UW = "u"
ER = "ɚ"
AX = "ə"
AH = "ʌ"

# Diphthongs
AY = "ɑɪ"
AW = "ɑʊ"
OY = "ɔɪ"

# ── Consonants ──────────────────────────────────────────────────────

P = "p"
B = "b"
T = "t"
D = "d"
K = "k"
G = "g"
F = "f"
V = "v"
TH = "θ"
DH = "ð"
S = "s"
Z = "z"
SH = "ʃ"
ZH = "ʒ"
HH = "h"
M = "m"
N = "n"
NG = "ŋ"
L = "l"
W = "w"
Y = "j"
R = "ɹ"
CH = "ʧ"
JH = "ʤ"
WH = "hw"

VOWELS: List[str] = [IY, IH, EY, EH, AE, AA, AO, OW, UH, UW, ER, AX, AH]

DIPHTHONGS: List[str] = [AY, AW, OY]

CONSONANTS: List[str] = [
    P, B, T, D, K, G, F, V, TH, DH, S, Z, SH, ZH, HH,
    M, N, NG, L, W, Y, R, CH, JH, WH,
]

PHONEMES: List[str] = VOWELS + DIPHTHONGS + CONSONANTS

PLOSIVES = frozenset([P, B, T, D, K, G])

FRICATIVES = frozenset([F, V, TH, DH, S, Z, SH, ZH, HH, CH, JH])

# ── Structural markers ──────────────────────────────────────────────

PAUSE = " "     # word / sentence break
SILENT = ""     # consumed input, no sound

# Match text of the catch-all entry that closes every rule bucket.
# It is never scanned for in the input.
UNKNOWN = "!%@$#"

# ── Special Tokens ──────────────────────────────────────────────────

PAD_TOKEN = "<pad>"
UNK_TOKEN = "<unk>"
SPACE_TOKEN = PAUSE
SIL_TOKEN = "<sil>"  # utterance boundary silence

SPECIAL_TOKENS: List[str] = [PAD_TOKEN, UNK_TOKEN, SPACE_TOKEN, SIL_TOKEN]


def is_vowel(phoneme: str) -> bool:
    """True for monophthong vowels (diphthongs are reported separately)."""
    return phoneme in VOWELS


def is_consonant(phoneme: str) -> bool:
    return phoneme in CONSONANTS


def is_diphthong(first: str, second: str = "") -> bool:
    """
    Check for one of the AY, AW, OY diphthongs.

    Accepts either the combined symbol ("ɑɪ") or its two halves
    ("ɑ", "ɪ"). WH is a doublet of two consonants, not a diphthong.
    """
    return (first + second) in DIPHTHONGS


def is_plosive(phoneme: str) -> bool:
    return phoneme in PLOSIVES


def is_fricative(phoneme: str) -> bool:
    return phoneme in FRICATIVES


def build_vocab() -> Dict[str, int]:
    """
    Build the complete phoneme-to-integer vocabulary.

    Order: special tokens → vowels → diphthongs → consonants.
    Total vocab size is 45 tokens.

    Returns:
        Dict mapping phoneme string to integer ID.
    """
    vocab: Dict[str, int] = {}

    for token in SPECIAL_TOKENS:
        vocab[token] = len(vocab)

    for ph in PHONEMES:
        vocab[ph] = len(vocab)

    return vocab


# Pre-built vocabulary (module-level constant)
PHONEME_TO_ID: Dict[str, int] = build_vocab()
ID_TO_PHONEME: Dict[int, str] = {v: k for k, v in PHONEME_TO_ID.items()}
VOCAB_SIZE: int = len(PHONEME_TO_ID)


if __name__ == "__main__":
    print(f"English phoneme vocabulary size: {VOCAB_SIZE}")
    print(f"  Vowels:     {len(VOWELS)}")
    print(f"  Diphthongs: {len(DIPHTHONGS)}")
    print(f"  Consonants: {len(CONSONANTS)}")
    print(f"  Special:    {len(SPECIAL_TOKENS)}")
    print()
    for ph, idx in PHONEME_TO_ID.items():
        print(f"  {idx:3d} → {ph!r}")
