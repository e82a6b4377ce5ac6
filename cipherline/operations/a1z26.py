"""A1Z26: letters to their 1-based alphabet positions and back."""

from cipherline.core.letters import is_ascii_letter, letter_index

_MAX_CODE = 26


def _collapse_whitespace(text: str) -> str:
    # Runs of two or more whitespace characters become one space
    pieces = []
    index = 0
    length = len(text)
    while index < length:
        if not text[index].isspace():
            pieces.append(text[index])
            index += 1
            continue
        end = index
        while end < length and text[end].isspace():
            end += 1
        pieces.append(text[index] if end - index == 1 else " ")
        index = end
    return "".join(pieces)


def a1z26_encode(text: str) -> str:
    """Encode letters as numbers separated by single spaces.

    Every character becomes one space-separated token: letters their
    position (``a``/``A`` -> ``1``), anything else itself. Whitespace runs are
    then collapsed and the result is trimmed, so ``"abc xyz"`` encodes to
    ``"1 2 3 24 25 26"``.
    """
    tokens = [
        str(letter_index(char) + 1) if is_ascii_letter(char) else char
        for char in text
    ]
    return _collapse_whitespace(" ".join(tokens)).strip()


def _is_word_char(char: str) -> bool:
    return char == "_" or ("0" <= char <= "9") or ("a" <= char <= "z") or ("A" <= char <= "Z")


def _decode_token(token: str) -> str:
    if not token.isdigit() or token.startswith("0"):
        return token
    value = int(token)
    if value > _MAX_CODE:
        return token
    return chr(96 + value)


def a1z26_decode(text: str) -> str:
    """Replace each standalone number from 1 to 26 with its lowercase letter.

    A number is standalone when it is not joined to an ASCII letter, digit or
    underscore on either side. Numbers with leading zeros, numbers outside
    1..26 and numbers embedded in words are left untouched.
    """
    pieces = []
    index = 0
    length = len(text)
    while index < length:
        if not _is_word_char(text[index]):
            pieces.append(text[index])
            index += 1
            continue
        end = index
        while end < length and _is_word_char(text[end]):
            end += 1
        pieces.append(_decode_token(text[index:end]))
        index = end
    return "".join(pieces)
