"""Line input, typed parsing of text, and flushed formatted output."""

from __future__ import annotations

import sys
from typing import Any, Callable, TypeVar

T = TypeVar("T")

_BOOL_WORDS = {"true": True, "false": False}


def cin() -> str:
    """Read one line from standard input, keeping its trailing newline.

    Returns an empty string at end of input.
    """
    return sys.stdin.readline()


def _parse(text: str, kind: Callable[[str], T]) -> T:
    """Parse ``text`` strictly as ``kind``; raise ValueError when it does not fit."""
    if kind is str:
        return text  # type: ignore[return-value]
    if text != text.strip():
        raise ValueError(f"surrounding whitespace in {text!r}")
    if kind is bool:
        try:
            return _BOOL_WORDS[text]  # type: ignore[return-value]
        except KeyError:
            raise ValueError(f"not a boolean: {text!r}") from None
    try:
        return kind(text)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"cannot parse {text!r}") from exc


def cin_parse(text: str, kind: Callable[..., T]) -> T:
    """Parse ``text`` as a single value of ``kind``.

    When the text does not parse, the default value ``kind()`` is returned.
    """
    try:
        return _parse(text, kind)
    except ValueError:
        return kind()


def cin_parse_list(text: str, kind: Callable[[str], T]) -> list[T]:
    """Parse each whitespace-separated token of ``text`` as ``kind``.

    Tokens that do not parse are skipped.
    """
    values: list[T] = []
    for token in text.split():
        try:
            values.append(_parse(token, kind))
        except ValueError:
            continue
    return values


def cout(fmt: str, *args: Any) -> None:
    """Write ``fmt`` formatted with ``args`` to standard output and flush."""
    sys.stdout.write(fmt.format(*args))
    sys.stdout.flush()


def endl() -> None:
    """Write a newline to standard output and flush."""
    cout("\n")


def cout_endl(fmt: str, *args: Any) -> None:
    """Write formatted output followed by a newline, then flush."""
    cout(fmt, *args)
    endl()