from types import MappingProxyType

from asciiart.errors import UnknownAlphabet

# Index 0 is black, the last character is white. Trailing spaces matter.
ALPHABETS = MappingProxyType(
    {
        "heuristic": "#=$8Z7I\\O?+:-,. ",
        "alternate": "@#8&o:*. ",
        "asciifi1": "@GCLftli;:,. ",
        "asciifi2": "#WMBRXVYIti+=;:,. ",
        "asciifi3": "##XXxxx+++===---;;,,...  ",
    }
)

DEFAULT_ALPHABET = "heuristic"

UNKNOWN_NAME = "unknown"


def alphabet_names() -> list[str]:
    return sorted(ALPHABETS)


def get_alphabet(name: str) -> str:
    """Return the alphabet registered under ``name``."""
    try:
        return ALPHABETS[name]
    except KeyError:
        raise UnknownAlphabet(name, alphabet_names()) from None


def alphabet_name(alphabet: str) -> str:
    """Name of a registered alphabet, for display. Falls back to ``"unknown"``."""
    for name, chars in ALPHABETS.items():
        if chars == alphabet:
            return name
    return UNKNOWN_NAME
