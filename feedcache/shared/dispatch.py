"""Completion delivery for callback-style loaders."""

import inspect
from typing import Any, Callable

Completion = Callable[..., Any]


async def deliver(completion: Completion, *args: Any) -> None:
    """Invoke ``completion`` with ``args``, awaiting it if it is a coroutine function."""
    if inspect.iscoroutinefunction(completion):
        await completion(*args)
    else:
        completion(*args)
