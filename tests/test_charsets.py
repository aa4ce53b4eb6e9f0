import pytest

from asciiart.charsets import (
    ALPHABETS,
    DEFAULT_ALPHABET,
    alphabet_name,
    alphabet_names,
    get_alphabet,
)
from asciiart.errors import InvalidAlphabetName, UnknownAlphabet


def test_catalogue_sequences_are_exact():
    assert ALPHABETS["heuristic"] == "#=$8Z7I\\O?+:-,. "
    assert ALPHABETS["alternate"] == "@#8&o:*. "
    assert ALPHABETS["asciifi1"] == "@GCLftli;:,. "
    assert ALPHABETS["asciifi2"] == "#WMBRXVYIti+=;:,. "
    assert ALPHABETS["asciifi3"] == "##XXxxx+++===---;;,,...  "


def test_all_alphabets_end_in_white():
    for chars in ALPHABETS.values():
        assert len(chars) >= 1
        assert chars[-1] == " "


def test_default_is_heuristic():
    assert DEFAULT_ALPHABET == "heuristic"
    assert get_alphabet(DEFAULT_ALPHABET) == ALPHABETS["heuristic"]


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        ALPHABETS["mine"] = "@ "


def test_unknown_name_raises():
    with pytest.raises(UnknownAlphabet, match="no such alphabet 'nope'"):
        get_alphabet("nope")


def test_unknown_name_lists_recognized_alphabets():
    with pytest.raises(InvalidAlphabetName) as info:
        get_alphabet("nope")
    assert info.value.known == alphabet_names()
    for name in ALPHABETS:
        assert name in str(info.value)


def test_alphabet_name_reverse_lookup():
    for name, chars in ALPHABETS.items():
        assert alphabet_name(chars) == name


def test_alphabet_name_unknown_sentinel():
    assert alphabet_name("@ ") == "unknown"
    assert alphabet_name(ALPHABETS["heuristic"].rstrip()) == "unknown"


def test_alphabet_names_sorted():
    assert alphabet_names() == ["alternate", "asciifi1", "asciifi2", "asciifi3", "heuristic"]
