from english_tts.setup_data import (
    DICT_NAME,
    FILELIST_NAME,
    collect_words,
    create_pronunciation_dictionary,
    main,
    verify_dataset,
)
from english_tts.text_processing import cleaned_text_to_sequence, sequence_to_text, text_to_sequence


def _write_metadata(path):
    (path / "metadata.csv").write_text(
        "utt_0001|Thin dog's dog.|\n"
        "utt_0002|THIN|\n",
        encoding="utf-8",
    )


def test_collect_words(tmp_path):
    _write_metadata(tmp_path)

    assert collect_words(tmp_path / "metadata.csv") == {"thin", "dog's", "dog"}


def test_create_pronunciation_dictionary(tmp_path):
    _write_metadata(tmp_path)

    dict_path = create_pronunciation_dictionary(str(tmp_path))

    lines = dict_path.read_text(encoding="utf-8").splitlines()
    assert "dog\td ɑ g" in lines
    assert "dog's\td ɑ g z" in lines
    assert "thin\tθ ɪ n" in lines


def test_missing_metadata_is_logged(tmp_path):
    assert create_pronunciation_dictionary(str(tmp_path)) is None
    assert verify_dataset(str(tmp_path)) is False


def test_main_all(tmp_path):
    _write_metadata(tmp_path)

    assert main(["-o", str(tmp_path), "--all"]) == 0

    assert (tmp_path / DICT_NAME).exists()
    filelist = (tmp_path / FILELIST_NAME).read_text(encoding="utf-8").splitlines()
    assert len(filelist) == 2
    utt_id, indices = filelist[1].split("|")
    assert utt_id == "utt_0002"
    assert cleaned_text_to_sequence(indices) == text_to_sequence("THIN")


def test_sequence_to_text():
    assert sequence_to_text(text_to_sequence("thin")) == "<sil> θ ɪ n <sil>"
