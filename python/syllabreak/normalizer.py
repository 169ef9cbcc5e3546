"""Word normalization for pattern matching.

Patterns are stored lowercase and matched against the word surrounded by
a boundary marker on each side. Normalization never changes the number of
characters, so every offset computed on the normalized form is valid on
the caller's original word.
"""

BOUNDARY = "."


def normalize_char(char: str) -> str:
    """Lowercase a single character, keeping it if lowercasing changes its length.

    Args:
        char: Single character.

    Returns:
        A single character.
    """
    lower = char.lower()
    if len(lower) != 1:
        # "İ".lower() is two code points
        return char
    return lower


def normalize_word(word: str) -> str:
    """Lowercase a word character by character.

    Args:
        word: Word to normalize.

    Returns:
        Normalized word, same length as ``word``.
    """
    return "".join(normalize_char(char) for char in word)


def is_hyphenatable(word: str) -> bool:
    """Check that a word is non-empty and made of letters only."""
    return word.isalpha()


def pad(word: str) -> str:
    """Surround a normalized word with boundary markers."""
    return f"{BOUNDARY}{word}{BOUNDARY}"


def is_all_upper(word: str) -> bool:
    """True if the word has cased letters and all of them are uppercase."""
    return word.isupper()
