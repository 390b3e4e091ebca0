import pytest

import english_tts.g2p as g2p_module
from english_tts.config import G2PConfig
from english_tts.g2p import (
    EnglishG2P,
    UnknownSymbol,
    generate_pronunciation_dictionary,
    normalize_text,
    pad_word,
    tokenize,
    translate_word,
)
from english_tts.phonemes import (
    AY, CH, JH, PAUSE, PHONEME_TO_ID, SIL_TOKEN, SILENT, SPACE_TOKEN, UNK_TOKEN,
)
from english_tts.rules import get_rule_table

SENTENCE = "That quick beige fox jumped in the air over each thin dog."
SENTENCE_IPA = "ðæt kwɪk big fɑks ʤʌmpt ɪn ðə ɛɹ ovɚ iʧ θɪn dɑg "


@pytest.fixture()
def g2p():
    return EnglishG2P()


def test_dinosaur_golden(g2p):
    assert g2p.text_to_ipa("dinosaur") == "dɪnɑzɔɹ"


def test_sentence_golden(g2p):
    assert g2p.text_to_ipa(SENTENCE) == SENTENCE_IPA


def test_single_letter_i_uses_word_edge_rule(g2p):
    assert translate_word(" I ") == [AY]
    assert g2p.text_to_phonemes("I") == [AY]


def test_translation_is_deterministic(g2p):
    first = g2p.text_to_phonemes(SENTENCE)
    for _ in range(3):
        assert g2p.text_to_phonemes(SENTENCE) == first
    assert EnglishG2P().text_to_phonemes(SENTENCE) == first


def test_silent_markers_are_kept_by_default(g2p):
    assert g2p.word_to_phonemes("jumped") == [JH, "ʌ", "m", "p", SILENT, "t"]


def test_silent_markers_can_be_dropped():
    g2p = EnglishG2P(config=G2PConfig(keep_silent=False))
    assert SILENT not in g2p.word_to_phonemes("jumped")
    assert g2p.text_to_ipa("jumped") == "ʤʌmpt"


def test_each_ends_in_ch(g2p):
    assert g2p.word_to_phonemes("each")[-1] == CH


def test_apostrophe_s_uses_punctuation_bucket(g2p):
    assert g2p.text_to_ipa("dog's") == "dɑgz"


def test_typographic_apostrophe_is_normalized(g2p):
    assert g2p.text_to_ipa("dog’s") == "dɑgz"


def test_pauses_for_spaces_and_sentence_punctuation(g2p):
    assert g2p.text_to_phonemes(", ") == [PAUSE, PAUSE]
    assert g2p.text_to_phonemes("?!") == [PAUSE, PAUSE]


def test_hyphen_and_lone_apostrophe_are_silent():
    assert translate_word(" - ") == [SILENT]
    assert translate_word(" ' ") == [SILENT]


def test_unmatched_symbol_is_reported_not_raised():
    assert translate_word(" # ") == [UnknownSymbol("#")]
    assert translate_word(" 42 ") == [UnknownSymbol("4"), UnknownSymbol("2")]


@pytest.mark.parametrize(
    "policy,expected",
    [("drop", []), ("literal", ["#"]), ("placeholder", [UNK_TOKEN])],
)
def test_unknown_policy(policy, expected):
    g2p = EnglishG2P(config=G2PConfig(unknown_policy=policy))
    assert g2p.text_to_phonemes("#") == expected


def test_non_ascii_letters_fall_through(g2p):
    # Ø has no decomposition, so it stays outside A-Z and hits the punctuation bucket
    g2p_literal = EnglishG2P(config=G2PConfig(unknown_policy="literal"))
    assert "Ø" in g2p_literal.text_to_phonemes("ø")
    assert g2p.text_to_phonemes("ø") == []


def test_accented_letters_fold_to_base_letters(g2p):
    assert normalize_text("naïve") == "NAIVE"
    assert tokenize(normalize_text("naïve")) == ["NAIVE"]
    assert g2p.text_to_ipa("naïve") == g2p.text_to_ipa("naive")


def test_accented_final_letter_is_kept(g2p):
    assert normalize_text("café") == "CAFE"
    assert g2p.text_to_ipa("café") == g2p.text_to_ipa("cafe")
    assert normalize_text("Ångström") == "ANGSTROM"


def test_unicode_folding_can_be_disabled():
    assert normalize_text("é", fold_unicode=False) == "É"



def test_scan_advances_every_iteration(monkeypatch):
    calls = []
    original = g2p_module.select_rule

    def counting(buffer, index, bucket):
        calls.append(index)
        return original(buffer, index, bucket)

    monkeypatch.setattr(g2p_module, "select_rule", counting)

    word = pad_word("SUPERCALIFRAGILISTICEXPIALIDOCIOUS")
    translate_word(word)

    assert calls == sorted(set(calls))
    assert len(calls) <= len(word) - 2
    assert calls[0] == 1


def test_translate_word_requires_padding():
    with pytest.raises(ValueError):
        translate_word("DOG")
    with pytest.raises(ValueError):
        translate_word("")


def test_custom_rule_table(make_table):
    table = make_table({"A": [("", "A", "", ["x"])], "": [("", " ", "", [PAUSE])]})
    g2p = EnglishG2P(rule_table=table)

    assert g2p.text_to_phonemes("a a") == ["x", PAUSE, "x"]
    assert translate_word(" B ", table) == [UnknownSymbol("B")]


def test_tokenize_splits_letter_runs():
    assert tokenize(normalize_text("Don't stop, OK?")) == ["DON'T", " ", "STOP", ", ", "OK", "?"]


def test_empty_text(g2p):
    assert g2p.text_to_phonemes("") == []
    assert g2p.text_to_phonemes("   ") == [PAUSE, PAUSE, PAUSE]
    assert g2p.text_to_indices("") == []


def test_sil_tokens_frame_utterance():
    g2p = EnglishG2P(config=G2PConfig(add_sil_tokens=True))
    phonemes = g2p.text_to_phonemes("thin dog")
    assert phonemes[0] == SIL_TOKEN
    assert phonemes[-1] == SIL_TOKEN


def test_text_to_indices(g2p):
    indices = g2p.text_to_indices("thin dog")

    expected = [PHONEME_TO_ID[p] for p in ["θ", "ɪ", "n", SPACE_TOKEN, "d", "ɑ", "g"]]
    assert indices == expected
    assert g2p.indices_to_phonemes(indices) == ["θ", "ɪ", "n", SPACE_TOKEN, "d", "ɑ", "g"]


def test_text_to_indices_skips_silent_and_maps_unknown():
    g2p = EnglishG2P(config=G2PConfig(unknown_policy="literal"))

    indices = g2p.text_to_indices("jumped #")

    assert indices[-1] == PHONEME_TO_ID[UNK_TOKEN]
    assert len(indices) == 7  # ʤ ʌ m p t, pause, <unk>


def test_state_round_trip():
    g2p = EnglishG2P(config=G2PConfig(unknown_policy="placeholder"))

    restored = EnglishG2P.from_dict(g2p.to_dict())

    assert restored.config.unknown_policy == "placeholder"
    assert restored.phoneme_to_id == g2p.phoneme_to_id
    assert restored.get_vocab_size() == g2p.get_vocab_size()


def test_process_text(g2p):
    assert g2p.process_text("") == [[]]
    assert g2p.process_text("I") == [[AY]]


def test_uses_shared_rule_table(g2p):
    assert g2p.rule_table is get_rule_table()


def test_generate_pronunciation_dictionary(tmp_path):
    out = tmp_path / "dict.txt"

    written = generate_pronunciation_dictionary(["dog", "Dog", "thin", "  "], str(out))

    assert written == 2
    assert out.read_text(encoding="utf-8").splitlines() == [
        "dog\td ɑ g",
        "thin\tθ ɪ n",
    ]
