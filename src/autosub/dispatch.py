"""Class-scope dispatch: the ``AutoDispatch`` mixin and ``@autosub`` decorator.

Each ``AutoDispatch`` subclass gets its own ``PatternRegistry``, built by
``__init_subclass__`` from the functions marked with ``@autosub`` in the
class body. Unknown attribute lookups on instances fall through to
``__getattr__``, which asks the registries along the MRO in order.

Usage::

    class Things(AutoDispatch):
        @autosub(r"^get_(\\w+)$")
        def _get(self, what, *params):
            return f"Getting {what}"

        @autosub(r"^set_(\\w+)_(\\w+)$")
        def _set(self, adjective, noun, *params):
            return f"Setting the {adjective} {noun}"

        @autosub(r"foo$", name="handle_foo_events")
        def handle_foo_events(self, subname, *params):
            return f"Called {subname} to do something to a foo"

    things = Things()
    things.get_foo()             # "Getting foo"
    can(Things, "set_blue_cat")  # callable
"""

import inspect
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from autosub.config import DispatchConfig
from autosub.entry import BoundHandler, NoMatch, _NoMatchType
from autosub.registry import PatternRegistry

logger = logging.getLogger("autosub.dispatch")

_MARKER = "__autosub__"
_REGISTRY_ATTR = "__autosub_registry__"


@dataclass(frozen=True, slots=True)
class PendingHandler:
    """A handler declaration waiting for its class to be created."""

    pattern: str | re.Pattern[str]
    name: str | None = None


def autosub(
    pattern: str | re.Pattern[str],
    *,
    name: str | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Declare a method-missing handler inside an ``AutoDispatch`` class body.

    Args:
        pattern: Regular expression tested against unknown method names.
            Captured groups are passed to the handler after ``self``; with
            no groups the full method name is passed instead.
        name: Optional attribute name to bind the handler under. A named
            handler is an ordinary method: nothing is prepended when it
            is called directly. Anonymous handlers are removed from the
            class namespace and are reachable only through dispatch.

    Decorators can be stacked to register one function for several
    patterns; they are registered in source order.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        pending = (PendingHandler(pattern, name), *getattr(func, _MARKER, ()))
        setattr(func, _MARKER, pending)
        return func

    return decorator


class AutoDispatch:
    """Mixin that routes unknown attribute lookups through pattern handlers.

    Pass ``config=`` as a class keyword to change dispatch behaviour; a
    subclass without one inherits its nearest base's config::

        class Strict(AutoDispatch, config=DispatchConfig(match_mode="fullmatch")):
            ...
    """

    __slots__ = ()

    __autosub_registry__: ClassVar[PatternRegistry]

    def __init_subclass__(cls, config: DispatchConfig | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if config is None:
            inherited = getattr(cls, _REGISTRY_ATTR, None)
            config = inherited.config if inherited is not None else None

        registry = PatternRegistry(scope=cls, config=config)
        for attr, value in list(vars(cls).items()):
            pending: tuple[PendingHandler, ...] = getattr(value, _MARKER, ())
            if not pending:
                continue
            if all(item.name != attr for item in pending):
                delattr(cls, attr)
            for item in pending:
                registry.register(item.pattern, value, name=item.name)

        setattr(cls, _REGISTRY_ATTR, registry)
        logger.debug("Built registry for %s with %d handler(s)", cls.__qualname__, len(registry))

    def __getattr__(self, name: str) -> Any:
        if not _is_dunder(name):
            resolved = try_resolve(self, name)
            if resolved is not NoMatch:
                return resolved
        msg = f"{type(self).__name__!r} object has no attribute {name!r}"
        raise AttributeError(msg, name=name, obj=self)


def registry_of(cls: type) -> PatternRegistry | None:
    """Return the registry declared by ``cls`` itself, not its bases."""
    return vars(cls).get(_REGISTRY_ATTR)


def try_resolve(obj: Any, name: str) -> BoundHandler | _NoMatchType:
    """Resolve ``name`` for ``obj`` through the registries on its MRO.

    Each class is asked in MRO order and the first class with a matching
    handler wins. The result is bound to ``obj``, so calling it invokes
    ``handler(obj, *prefix, *args)``.
    """
    resolved = _resolve_in_mro(type(obj), name)
    if resolved is NoMatch:
        return NoMatch
    return resolved.bind(obj)


def can(target: Any, name: str) -> Callable[..., Any] | None:
    """Return a callable for ``name`` on ``target``, or ``None``.

    ``target`` may be an instance or a class. Normally defined attributes
    take precedence over pattern handlers. For a class, the dispatched
    callable takes the receiver as its first argument, like a function
    looked up on the class.
    """
    try:
        inspect.getattr_static(target, name)
    except AttributeError:
        pass
    else:
        attr = getattr(target, name)
        return attr if callable(attr) else None

    if _is_dunder(name):
        return None

    if not isinstance(target, type):
        resolved = try_resolve(target, name)
        return resolved or None

    unbound = _resolve_in_mro(target, name)
    if unbound is NoMatch:
        return None
    return _as_function(unbound)


def registries_in_mro(cls: type) -> list[tuple[type, PatternRegistry]]:
    """Return ``(owner, registry)`` pairs in the order dispatch consults them."""
    pairs: list[tuple[type, PatternRegistry]] = []
    for klass in cls.__mro__:
        registry = registry_of(klass)
        if registry is not None:
            pairs.append((klass, registry))
    return pairs


def _resolve_in_mro(cls: type, name: str) -> BoundHandler | _NoMatchType:
    for _owner, registry in registries_in_mro(cls):
        result = registry.resolve(name)
        if result is not NoMatch:
            return result
    return NoMatch


def _as_function(resolved: BoundHandler) -> Callable[..., Any]:
    def dispatched(receiver: Any, *args: Any, **kwargs: Any) -> Any:
        return resolved.bind(receiver)(*args, **kwargs)

    dispatched.__name__ = resolved.method_name
    dispatched.__qualname__ = resolved.method_name
    return dispatched


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")
