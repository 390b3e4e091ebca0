from english_tts import phonemes


def test_inventory_has_41_phonemes():
    assert len(phonemes.PHONEMES) == 41
    assert len(set(phonemes.PHONEMES)) == 41


def test_markers_are_not_phonemes():
    assert phonemes.PAUSE not in phonemes.PHONEMES
    assert phonemes.SILENT not in phonemes.PHONEMES
    assert phonemes.UNKNOWN not in phonemes.PHONEMES


def test_vocab_is_contiguous():
    ids = sorted(phonemes.PHONEME_TO_ID.values())
    assert ids == list(range(phonemes.VOCAB_SIZE))
    assert phonemes.PHONEME_TO_ID[phonemes.PAD_TOKEN] == 0
    assert phonemes.VOCAB_SIZE == len(phonemes.SPECIAL_TOKENS) + 41


def test_classes():
    assert phonemes.is_vowel(phonemes.IY)
    assert not phonemes.is_vowel(phonemes.P)
    assert phonemes.is_consonant(phonemes.WH)
    assert phonemes.is_diphthong(phonemes.AY)
    assert phonemes.is_diphthong("ɔ", "ɪ")
    assert not phonemes.is_diphthong(phonemes.AA, phonemes.AA)
    assert phonemes.is_plosive(phonemes.K)
    assert not phonemes.is_plosive(phonemes.S)
    assert phonemes.is_fricative(phonemes.ZH)
    assert not phonemes.is_fricative(phonemes.M)
