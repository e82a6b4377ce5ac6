"""Operation library: pure ``(text, parameters) -> text`` functions.

Provides:
- caesar, rot13
- reverse_text, replace_text, transform_case
- a1z26_encode, a1z26_decode
- vigenere
- rail_fence_encode, rail_fence_decode
"""

from cipherline.operations.a1z26 import a1z26_decode, a1z26_encode
from cipherline.operations.caesar import caesar, rot13
from cipherline.operations.rail_fence import (
    rail_fence_decode,
    rail_fence_encode,
    zigzag_pattern,
)
from cipherline.operations.text import (
    replace_text,
    reverse_text,
    title_case,
    toggle_case,
    transform_case,
)
from cipherline.operations.vigenere import key_offsets, vigenere

__all__ = [
    # Letter ciphers
    "caesar",
    "rot13",
    "vigenere",
    "key_offsets",
    # Numeric substitution
    "a1z26_encode",
    "a1z26_decode",
    # Transposition
    "rail_fence_encode",
    "rail_fence_decode",
    "zigzag_pattern",
    # Text edits
    "reverse_text",
    "replace_text",
    "transform_case",
    "title_case",
    "toggle_case",
]
