"""Caesar shift and ROT13."""

from cipherline.core.letters import inverse_shift, normalize_shift, shift_text

ROT13_SHIFT = 13


def caesar(
    text: str,
    shift: int,
    mode: str = "encode",
    preserve_case: bool = True,
) -> str:
    """Shift every ASCII letter of ``text`` by ``shift`` positions.

    The shift is wrapped into ``[0, 25]`` first. Decoding applies the inverse
    shift, so ``caesar(caesar(x, s), s, "decode") == x`` for letters-only text.
    """
    normalized = normalize_shift(shift)
    effective = normalized if mode == "encode" else inverse_shift(normalized)
    return shift_text(text, effective, preserve_case)


def rot13(text: str) -> str:
    """Caesar with a fixed shift of 13; its own inverse."""
    return shift_text(text, ROT13_SHIFT, preserve_case=True)
