"""Vigenère cipher with a letter-only key stream."""

from cipherline.core.letters import inverse_shift, is_ascii_letter, shift_letter


def key_offsets(key: str | None) -> list[int]:
    """Turn a key into its list of shifts (``a`` -> 0 ... ``z`` -> 25).

    The key is lowercased and everything outside ``a``-``z`` is dropped.
    """
    return [ord(char) - ord("a") for char in (key or "").lower() if "a" <= char <= "z"]


def vigenere(
    text: str,
    key: str | None,
    mode: str = "encode",
    preserve_case: bool = True,
) -> str:
    """Encode or decode ``text`` with a repeating key.

    Only ASCII letters consume a key position; other characters pass through
    and do not advance the key. A key without letters leaves ``text`` as is.
    """
    offsets = key_offsets(key)
    if not offsets:
        return text

    pieces = []
    key_index = 0
    for char in text:
        if not is_ascii_letter(char):
            pieces.append(char)
            continue
        offset = offsets[key_index % len(offsets)]
        key_index += 1
        shift = inverse_shift(offset) if mode == "decode" else offset
        pieces.append(shift_letter(char, shift, preserve_case))
    return "".join(pieces)
