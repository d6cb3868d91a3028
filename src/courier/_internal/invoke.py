"""Call sync or async callables uniformly.

Route handlers, middleware transforms and fallback drivers can each be
``def`` or ``async def``. Everything that calls user code goes through
``invoke`` so the awaitable check lives in one place.
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it is awaitable::

        # sync handler
        def get_item(request, response):
            response.json({"id": 7})

        # async handler
        async def get_item(request, response):
            response.json(await load(request.context["params"]["id"]))
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
