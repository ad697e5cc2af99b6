"""Registry import resolution — resolves ``"module:attribute"`` strings.

Shared utility used by ``autosub patterns`` and ``autosub resolve`` to
locate the pattern registries behind a user-supplied import string.
"""

import importlib

from autosub.dispatch import AutoDispatch, registries_in_mro
from autosub.registry import PatternRegistry


def resolve_registries(import_string: str) -> list[tuple[str, PatternRegistry]]:
    """Resolve an import string to ``(owner, registry)`` pairs in dispatch order.

    Accepts ``"module:attribute"`` format. When the attribute portion is
    omitted, defaults to ``"registry"`` (e.g. ``"myapp.handlers"``
    resolves to ``myapp.handlers.registry``).

    A ``PatternRegistry`` yields a single pair owned by the import string.
    An ``AutoDispatch`` subclass yields one pair per class on its MRO that
    declares a registry, nearest class first, which is the order instance
    lookups use.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object carries no registry.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "registry"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if isinstance(obj, PatternRegistry):
        return [(f"{module_path}:{attr_name}", obj)]

    if isinstance(obj, type) and issubclass(obj, AutoDispatch):
        return [(owner.__qualname__, registry) for owner, registry in registries_in_mro(obj)]

    msg = (
        f"{import_string!r} resolved to {type(obj).__name__}, "
        "not a PatternRegistry or AutoDispatch subclass"
    )
    raise TypeError(msg)
