"""Invoke helpers — call sync or async handlers uniformly.

Route handlers can be ``def`` or ``async def``. Any code that calls
a user-provided handler must handle both cases. This module provides
a single helper so the sync/async check lives in exactly one place.

Usage::

    from routecanal._internal.invoke import invoke

    await invoke(handler, writer, request, params)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's a coroutine.

    Works with both sync and async callables::

        # sync: returns immediately, no await needed
        def about(writer, request, params):
            writer.write("about")

        # async: returns a coroutine, awaited automatically
        async def items(writer, request, params):
            writer.write(await load_items(params["1"]))
    """
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
