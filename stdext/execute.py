"""Call a function with a primary argument followed by optional extras."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar

R = TypeVar("R")


def execute(func: Callable[..., R], primary: Any, *args: Any) -> R:
    """Call ``func(primary, *args)`` and return its result."""
    return func(primary, *args)


async def execute_async(
    func: Callable[..., Awaitable[R]], primary: Any, *args: Any
) -> R:
    """Await ``func(primary, *args)`` and return its result."""
    return await func(primary, *args)