"""Rail-fence (zig-zag) transposition."""


def zigzag_pattern(length: int, rails: int) -> list[int]:
    """Return the rail index of each position for a text of ``length``.

    Rows bounce between 0 and ``rails - 1``: for 3 rails the pattern is
    ``0 1 2 1 0 1 2 ...``.
    """
    pattern = []
    row = 0
    direction = 1
    for _ in range(length):
        pattern.append(row)
        if row == 0:
            direction = 1
        if row == rails - 1:
            direction = -1
        row += direction
    return pattern


def rail_fence_encode(text: str, rails: int) -> str:
    """Write ``text`` along the zig-zag and read it back rail by rail."""
    if rails <= 1 or len(text) <= 1:
        return text

    fence: list[list[str]] = [[] for _ in range(rails)]
    for char, row in zip(text, zigzag_pattern(len(text), rails)):
        fence[row].append(char)
    return "".join("".join(line) for line in fence)


def rail_fence_decode(cipher: str, rails: int) -> str:
    """Invert :func:`rail_fence_encode` for the same rail count."""
    if rails <= 1 or len(cipher) <= 1:
        return cipher

    pattern = zigzag_pattern(len(cipher), rails)
    counts = [0] * rails
    for row in pattern:
        counts[row] += 1

    # Each rail owns a contiguous block of the ciphertext, in rail order
    blocks = []
    cursor = 0
    for count in counts:
        blocks.append(iter(cipher[cursor : cursor + count]))
        cursor += count

    return "".join(next(blocks[row]) for row in pattern)
