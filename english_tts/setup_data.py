#!/usr/bin/env python3
"""
Prepare English transcripts for TTS training.

Works on a dataset directory holding an LJSpeech-style metadata.csv
(id|text|normalized). This script:
  1. Generates an MFA pronunciation dictionary from every word in the
     transcripts, using the rule-based English G2P
  2. Writes a pre-computed phoneme filelist (id|space-separated indices)
     so training can skip the G2P
  3. Verifies the prepared files

Usage:
    python -m english_tts.setup_data -o data/ljspeech --create-dict
    python -m english_tts.setup_data -o data/ljspeech --all
"""

import argparse
import logging
import re
from pathlib import Path
from typing import Set

from tqdm import tqdm

from .g2p import generate_pronunciation_dictionary
from .text_processing import text_to_sequence

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)

DICT_NAME = "english_mfa_dictionary.txt"
FILELIST_NAME = "metadata_phonemes.csv"

_WORD_RE = re.compile(r"[A-Za-z']+")


def _transcript(parts) -> str:
    if len(parts) >= 3 and parts[2].strip():
        return parts[2]
    return parts[1]


def collect_words(metadata_path: Path) -> Set[str]:
    """Collect the distinct lowercase words used in metadata.csv."""
    words = set()
    with open(metadata_path, "r", encoding="utf-8") as f:
        for line in f:
            parts = line.rstrip("\n").split("|")
            if len(parts) < 2:
                continue
            for tok in _WORD_RE.findall(_transcript(parts)):
                tok = tok.strip("'").lower()
                if tok:
                    words.add(tok)
    return words


def create_pronunciation_dictionary(data_dir: str):
    """
    Generate an MFA pronunciation dictionary from the dataset transcriptions.

    Reads metadata.csv, extracts all unique words, and produces a
    pronunciation dictionary using the English G2P.
    """
    data_path = Path(data_dir)
    metadata_path = data_path / "metadata.csv"

    if not metadata_path.exists():
        logger.error(f"metadata.csv not found at {metadata_path}")
        return None

    words = collect_words(metadata_path)
    dict_path = data_path / DICT_NAME
    written = generate_pronunciation_dictionary(list(words), str(dict_path))
    logger.info(f"MFA dictionary written: {dict_path} ({written} words)")
    return dict_path


def create_phoneme_filelist(data_dir: str):
    """Write id|indices lines for every transcript in metadata.csv."""
    data_path = Path(data_dir)
    metadata_path = data_path / "metadata.csv"

    if not metadata_path.exists():
        logger.error(f"metadata.csv not found at {metadata_path}")
        return None

    with open(metadata_path, "r", encoding="utf-8") as f:
        lines = [line.rstrip("\n") for line in f]

    filelist_path = data_path / FILELIST_NAME
    written = 0
    skipped = 0

    with open(filelist_path, "w", encoding="utf-8", newline="") as out:
        for line in tqdm(lines, desc="Phonemizing", disable=len(lines) < 1000):
            parts = line.split("|")
            if len(parts) < 2:
                skipped += 1
                continue

            indices = text_to_sequence(_transcript(parts))
            if not indices:
                skipped += 1
                continue

            out.write(f"{parts[0]}|{' '.join(str(i) for i in indices)}\n")
            written += 1

    logger.info(f"Phoneme filelist written: {filelist_path} ({written} entries, {skipped} skipped)")
    return filelist_path


def verify_dataset(data_dir: str) -> bool:
    """Verify that the prepared files are ready for training."""
    data_path = Path(data_dir)

    checks = {
        "metadata.csv exists": (data_path / "metadata.csv").exists(),
    }

    if checks["metadata.csv exists"]:
        with open(data_path / "metadata.csv", "r", encoding="utf-8") as f:
            num_lines = sum(1 for _ in f)
        checks[f"metadata has {num_lines} entries"] = num_lines > 0

    dict_path = data_path / DICT_NAME
    if dict_path.exists():
        with open(dict_path, "r", encoding="utf-8") as f:
            num_words = sum(1 for _ in f)
        checks[f"MFA dictionary has {num_words} words"] = num_words > 0
    else:
        checks[f"{DICT_NAME} not found"] = False

    filelist_path = data_path / FILELIST_NAME
    if filelist_path.exists():
        with open(filelist_path, "r", encoding="utf-8") as f:
            num_entries = sum(1 for _ in f)
        checks[f"phoneme filelist has {num_entries} entries"] = num_entries > 0
    else:
        checks[f"{FILELIST_NAME} not found"] = False

    print("\n" + "=" * 50)
    print("Dataset Verification")
    print("=" * 50)
    all_ok = True
    for desc, ok in checks.items():
        status = "PASS" if ok else "FAIL"
        print(f"  [{status}] {desc}")
        if not ok:
            all_ok = False
    print("=" * 50)

    if all_ok:
        print("Dataset is ready for training!")
    else:
        print("Some checks failed. See above for details.")

    return all_ok


def main(argv=None):
    parser = argparse.ArgumentParser(description="Prepare English transcripts for TTS training")
    parser.add_argument(
        "--output-dir", "-o",
        default="data/ljspeech",
        help="Dataset directory containing metadata.csv",
    )
    parser.add_argument(
        "--create-dict",
        action="store_true",
        help="Generate MFA pronunciation dictionary",
    )
    parser.add_argument(
        "--phonemize",
        action="store_true",
        help="Write pre-computed phoneme index filelist",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Verify prepared dataset",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Run all steps: dict, phonemize, verify",
    )
    args = parser.parse_args(argv)

    if args.verify and not args.all:
        return 0 if verify_dataset(args.output_dir) else 1

    if args.all or not (args.create_dict or args.phonemize):
        create_pronunciation_dictionary(args.output_dir)
        create_phoneme_filelist(args.output_dir)
        if args.all:
            return 0 if verify_dataset(args.output_dir) else 1
        return 0

    if args.create_dict:
        create_pronunciation_dictionary(args.output_dir)

    if args.phonemize:
        create_phoneme_filelist(args.output_dir)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
