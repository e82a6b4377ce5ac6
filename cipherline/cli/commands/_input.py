"""Input text resolution shared by the run commands."""

import sys

import click


def resolve_input(input_text: str | None, input_file: str | None) -> str | None:
    """Pick the input text from ``--input``, ``--input-file`` or ``None``.

    ``--input-file -`` reads standard input. Returns None when neither option
    is given, meaning the recipe's own input is used.

    Raises:
        click.UsageError: If both options are given.
        click.FileError: If the input cannot be read or is not valid UTF-8.
    """
    if input_text is not None and input_file is not None:
        raise click.UsageError("Use either --input or --input-file, not both")
    if input_file is None:
        return input_text

    try:
        if input_file == "-":
            return sys.stdin.read()
        with open(input_file, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise click.FileError(input_file, hint=f"input is not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise click.FileError(input_file, hint=e.strerror or str(e)) from e
