"""Single-character shift and case primitives shared by the letter ciphers.

A character counts as a letter when its lowercase form starts with one of
``a``-``z``. Digits, punctuation, whitespace and letters from other scripts
always pass through unchanged.
"""

ALPHABET_SIZE = 26

_LOWER_A = ord("a")


def is_ascii_letter(char: str) -> bool:
    """Return True if ``char`` lowercases to a character in ``a``-``z``.

    Besides the 52 ASCII letters this includes a few compatibility
    characters such as KELVIN SIGN (``U+212A``, lowercase ``k``).
    """
    lowered = char.lower()
    return bool(lowered) and "a" <= lowered[0] <= "z"


def letter_index(char: str) -> int:
    """Return the 0-based alphabet position of a letter (``a`` -> 0)."""
    return ord(char.lower()[0]) - _LOWER_A


def normalize_shift(shift: int) -> int:
    """Wrap any integer shift into ``[0, 25]``."""
    return shift % ALPHABET_SIZE


def inverse_shift(shift: int) -> int:
    """Return the shift that undoes ``shift``."""
    return (ALPHABET_SIZE - normalize_shift(shift)) % ALPHABET_SIZE


def shift_letter(char: str, shift: int, preserve_case: bool = True) -> str:
    """Shift a single letter forward by ``shift`` positions.

    Args:
        char: A single character.
        shift: Forward shift, expected in ``[0, 25]``.
        preserve_case: Keep an ``A``-``Z`` input uppercase. Every other
            letter, and every letter when this is False, comes out lowercase.

    Returns:
        The shifted letter, or ``char`` unchanged if it is not a letter.
    """
    if not is_ascii_letter(char):
        return char

    shifted = chr((letter_index(char) + shift) % ALPHABET_SIZE + _LOWER_A)
    if preserve_case and "A" <= char <= "Z":
        return shifted.upper()
    return shifted


def shift_text(text: str, shift: int, preserve_case: bool = True) -> str:
    """Apply :func:`shift_letter` with the same shift to every character."""
    return "".join(shift_letter(char, shift, preserve_case) for char in text)
