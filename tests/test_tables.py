import pytest

from deckgen.input.tables import Entry, OverrideRule, load_extras, load_overrides, read_word_list


def test_read_word_list(deck_dir, write_csv):
    path = write_csv(deck_dir / "original-words.csv", 'Front,Back\nHaus,house\n"laufen, lief",to run\n')
    assert read_word_list(path) == [Entry("Haus", "house"), Entry("laufen, lief", "to run")]


def test_read_word_list_header_case_and_bom(deck_dir, write_csv):
    path = write_csv(deck_dir / "original-words.csv", "\ufefffront,BACK\nHaus,house\n")
    assert read_word_list(path) == [Entry("Haus", "house")]


def test_read_word_list_skips_blank_rows(deck_dir, write_csv):
    path = write_csv(deck_dir / "original-words.csv", "Front,Back\nHaus,house\n,\n\nBuch,book\n")
    assert [e.front for e in read_word_list(path)] == ["Haus", "Buch"]


def test_missing_word_list_is_fatal(deck_dir):
    with pytest.raises(FileNotFoundError):
        read_word_list(deck_dir / "original-words.csv")


def test_word_list_without_back_column_is_rejected(deck_dir, write_csv):
    path = write_csv(deck_dir / "original-words.csv", "Front\nHaus\n")
    with pytest.raises(ValueError, match="back"):
        read_word_list(path)


def test_missing_optional_tables_are_empty(deck_dir):
    assert load_overrides(deck_dir / "overrides.csv") == []
    assert load_extras(deck_dir / "extra.csv") == []


def test_empty_optional_tables_are_empty(deck_dir, write_csv):
    assert load_overrides(write_csv(deck_dir / "overrides.csv", "")) == []
    assert load_extras(write_csv(deck_dir / "extra.csv", "Front,Back,Order\n")) == []


def test_load_overrides_in_file_order(deck_dir, write_csv):
    path = write_csv(deck_dir / "overrides.csv", "Front,Order\nder Hund,3\nHa, 0\n")
    assert load_overrides(path) == [OverrideRule("der Hund", 3), OverrideRule("Ha", 0)]


def test_load_overrides_accepts_front_prefix_header(deck_dir, write_csv):
    path = write_csv(deck_dir / "overrides.csv", "frontPrefix,order\nHaus,-1\n")
    assert load_overrides(path) == [OverrideRule("Haus", -1)]


def test_load_overrides_rejects_non_integer_order(deck_dir, write_csv):
    path = write_csv(deck_dir / "overrides.csv", "Front,Order\nHaus,first\n")
    with pytest.raises(ValueError, match=r"overrides.csv:2"):
        load_overrides(path)


def test_load_extras(deck_dir, write_csv):
    path = write_csv(deck_dir / "extra.csv", "Front,Back,Order\nHallo,hello,2\nTschüss,bye,1\n")
    assert load_extras(path) == [Entry("Hallo", "hello", 2), Entry("Tschüss", "bye", 1)]
