"""Import resolution — resolves ``"module:attribute"`` strings to dispatchers.

Used by ``courier routes`` to locate a MockDispatcher from a user-supplied
import string.
"""

import importlib

from courier.client import Client
from courier.mock.dispatcher import MockDispatcher


def resolve_dispatcher(import_string: str) -> MockDispatcher:
    """Resolve an import string to a ``MockDispatcher``.

    Accepts ``"module:attribute"`` format. When the attribute portion is
    omitted, defaults to ``"mock"`` (e.g. ``"tests.mocks"`` resolves to
    ``tests.mocks.mock``).

    The attribute may be a ``MockDispatcher``, a ``Client`` whose driver is
    one, or a zero-argument factory returning either.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a dispatcher.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "mock"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, (MockDispatcher, Client)):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, Client):
        obj = obj.driver

    if not isinstance(obj, MockDispatcher):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a courier MockDispatcher"
        raise TypeError(msg)

    return obj
