"""Plain text edits: reverse, literal replace and case transforms."""


def reverse_text(text: str) -> str:
    """Reverse the sequence of code points."""
    return text[::-1]


def _fold_char(char: str) -> str:
    # Keep one character per position so folded indices map back to the input
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def _fold(text: str) -> str:
    return "".join(_fold_char(char) for char in text)


def replace_text(
    text: str,
    from_text: str,
    to_text: str | None = "",
    match_case: bool = True,
) -> str:
    """Replace every occurrence of ``from_text`` with ``to_text``.

    Matching is literal: no character in ``from_text`` has pattern meaning.
    Occurrences are found left to right without overlapping. When
    ``match_case`` is False, characters are compared by their single-character
    lowercase form.

    Returns ``text`` unchanged if ``from_text`` is empty or equal to
    ``to_text``.
    """
    replacement = to_text or ""
    if not from_text or from_text == replacement:
        return text

    if match_case:
        return text.replace(from_text, replacement)

    haystack = _fold(text)
    needle = _fold(from_text)
    pieces = []
    cursor = 0
    while True:
        found = haystack.find(needle, cursor)
        if found < 0:
            break
        pieces.append(text[cursor:found])
        pieces.append(replacement)
        cursor = found + len(needle)
    pieces.append(text[cursor:])
    return "".join(pieces)


def _starts_word(text: str, index: int) -> bool:
    if index == 0:
        return True
    previous = text[index - 1]
    return not (previous.isalnum() or previous == "_")


def title_case(text: str) -> str:
    """Capitalize the first letter of each word and lowercase the rest of it.

    A word is a run of letters that does not directly follow a digit or an
    underscore. Runs that do follow one, and all non-letters, are left as is.
    """
    pieces = []
    index = 0
    length = len(text)
    while index < length:
        if not text[index].isalpha():
            pieces.append(text[index])
            index += 1
            continue

        end = index
        while end < length and text[end].isalpha():
            end += 1
        run = text[index:end]
        if _starts_word(text, index):
            run = run[0].upper() + run[1:].lower()
        pieces.append(run)
        index = end
    return "".join(pieces)


def toggle_case(text: str) -> str:
    """Swap the case of every cased character."""
    pieces = []
    for char in text:
        lower = char.lower()
        upper = char.upper()
        if lower == upper:
            pieces.append(char)
        elif char == lower:
            pieces.append(upper)
        else:
            pieces.append(lower)
    return "".join(pieces)


def transform_case(text: str, case_mode: str) -> str:
    """Apply one of the ``upper``, ``lower``, ``title`` or ``toggle`` case modes.

    Unknown modes return ``text`` unchanged.
    """
    if case_mode == "upper":
        return text.upper()
    if case_mode == "lower":
        return text.lower()
    if case_mode == "title":
        return title_case(text)
    if case_mode == "toggle":
        return toggle_case(text)
    return text
