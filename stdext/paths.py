"""Joining path segments without doubled slashes."""

from __future__ import annotations

import os

_SEPARATORS = "/\\"


def _push(path: str, segment: str) -> str:
    if not path:
        return segment
    if path.endswith(tuple(_SEPARATORS)):
        return path + segment
    return f"{path}/{segment}"


def join_paths(base: str, *args: str) -> str:
    """Join ``base`` with one or more segments into a ``/``-separated path.

    Trailing slashes are stripped from the base and leading slashes from
    every segment, so each join point carries exactly one separator.
    """
    if not args:
        raise TypeError("join_paths requires at least one segment after the base")
    path = base.rstrip(_SEPARATORS)
    if os.name == "nt" and path.endswith(":") and os.path.isdir(path):
        path += "/"
    for segment in args:
        path = _push(path, segment.lstrip(_SEPARATORS))
    return path.replace("\\", "/")