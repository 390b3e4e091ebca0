#!/usr/bin/env python3
"""
Phonemized Text Dataset

Turns an LJSpeech-style transcript list into padded phoneme index
batches for a TTS text encoder. Translation runs inside __getitem__,
so a DataLoader with num_workers > 0 spreads the G2P work over worker
processes; the rule table is read-only and safe to share.
"""

import logging
import random
from pathlib import Path
from typing import Dict, List, Optional

import torch
from torch.nn.utils.rnn import pad_sequence
from torch.utils.data import Dataset, Sampler, Subset
from tqdm import tqdm

from .phonemes import PHONEME_TO_ID, PAD_TOKEN
from .text_processing import cleaned_text_to_sequence, get_g2p

logger = logging.getLogger(__name__)

PAD_ID = PHONEME_TO_ID[PAD_TOKEN]


class PhonemeTextDataset(Dataset):
    """
    Dataset of transcripts converted to phoneme indices.

    Expects a metadata file in LJSpeech format:
        id|text|normalized          # normalized text preferred when present

    With precomputed=True the text column already holds space-separated
    phoneme indices and the G2P is skipped.
    """

    def __init__(self, metadata_path: str, g2p=None, precomputed: bool = False):
        self.metadata_path = Path(metadata_path)
        if self.metadata_path.is_dir():
            self.metadata_path = self.metadata_path / "metadata.csv"

        self.precomputed = precomputed
        self.phoneme_processor = g2p or get_g2p()

        self.samples = self._load_samples()
        logger.info(f"Loaded {len(self.samples)} transcripts from {self.metadata_path}")

    def _load_samples(self) -> List[Dict]:
        """Load samples from metadata.csv (LJSpeech format)."""
        samples = []

        if not self.metadata_path.exists():
            raise FileNotFoundError(
                f"Metadata file not found: {self.metadata_path}\n"
                f"Run: python -m english_tts.setup_data -o {self.metadata_path.parent}"
            )

        with open(self.metadata_path, "r", encoding="utf-8") as f:
            total_lines = sum(1 for _ in f)

        with open(self.metadata_path, "r", encoding="utf-8") as f:
            for line in tqdm(f, total=total_lines, desc="Loading metadata", disable=total_lines < 1000):
                parts = line.rstrip("\n").split("|")
                if len(parts) < 2:
                    continue

                text = parts[2] if len(parts) >= 3 and parts[2].strip() else parts[1]
                if not text.strip():
                    continue

                samples.append({"utt_id": parts[0], "text": text})

        return samples

    def __len__(self) -> int:
        return len(self.samples)

    def __getitem__(self, idx: int) -> Dict:
        sample = self.samples[idx]

        if self.precomputed:
            indices = cleaned_text_to_sequence(sample["text"])
        else:
            indices = self.phoneme_processor.text_to_indices(sample["text"])

        if not indices:
            logger.debug(f"Empty phoneme sequence for {sample['utt_id']}")
            indices = [PAD_ID]

        return {
            "phoneme_indices": torch.tensor(indices, dtype=torch.long),
            "utt_id": sample["utt_id"],
            "text": sample["text"],
        }


def collate_fn(batch: List[Dict]) -> Dict:
    """Pad and batch samples."""
    phoneme_indices_list = [item["phoneme_indices"] for item in batch]

    phoneme_lengths = torch.tensor(
        [len(p) for p in phoneme_indices_list], dtype=torch.long
    )
    phoneme_indices_padded = pad_sequence(
        phoneme_indices_list, batch_first=True, padding_value=PAD_ID
    )

    return {
        "phoneme_indices": phoneme_indices_padded,
        "phoneme_lengths": phoneme_lengths,
        "utt_ids": [item["utt_id"] for item in batch],
        "texts": [item["text"] for item in batch],
    }


class LengthBasedBatchSampler(Sampler):
    """Groups transcripts of similar length to keep padding low."""

    def __init__(
        self,
        dataset: PhonemeTextDataset,
        batch_size: int,
        drop_last: bool = False,
        shuffle: bool = True,
        seed: Optional[int] = None,
    ):
        self.dataset = dataset
        self.batch_size = batch_size
        self.drop_last = drop_last
        self.shuffle = shuffle
        self.rng = random.Random(seed)
        self.lengths = self._get_lengths()

    def _get_lengths(self) -> List[int]:
        """Transcript lengths in characters, seen through a Subset if needed."""
        if isinstance(self.dataset, Subset):
            underlying = self.dataset.dataset
            return [len(underlying.samples[i]["text"]) for i in self.dataset.indices]
        return [len(s["text"]) for s in self.dataset.samples]

    def __iter__(self):
        indices = list(range(len(self.dataset)))
        pairs = sorted(zip(self.lengths, indices))

        batches = []
        for i in range(0, len(pairs), self.batch_size):
            batch = [idx for _, idx in pairs[i : i + self.batch_size]]
            if len(batch) == self.batch_size or not self.drop_last:
                batches.append(batch)

        if self.shuffle:
            self.rng.shuffle(batches)

        for batch in batches:
            yield batch

    def __len__(self):
        n = len(self.dataset)
        if self.drop_last:
            return n // self.batch_size
        return (n + self.batch_size - 1) // self.batch_size
