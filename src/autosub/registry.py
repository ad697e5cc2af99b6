"""Pattern registry: ordered (pattern, handler) table with first-match dispatch.

Handlers are registered while a class or module is being set up and are
looked up whenever a name fails normal attribute resolution.

Usage::

    registry = PatternRegistry()

    @registry.handler(r"^get_(\\w+)$")
    def _get(what, *args):
        return f"getting {what}"

    registry.resolve("get_foo")()  # "getting foo"

Thread safety:
    - HandlerEntry is a frozen dataclass (immutable)
    - Registration is expected to finish before concurrent lookups start
    - Concurrent resolve() calls on a built registry are safe
"""

import logging
import re
from collections.abc import Callable, Iterator, MutableMapping
from typing import Any

from autosub.config import DispatchConfig
from autosub.entry import BoundHandler, HandlerEntry, NoMatch, _NoMatchType
from autosub.errors import ConfigurationError, PatternCompileError

logger = logging.getLogger("autosub.registry")

Resolution = BoundHandler | _NoMatchType


def compile_pattern(pattern: str | re.Pattern[str], flags: int = 0) -> re.Pattern[str]:
    """Compile a handler pattern, converting ``re.error`` to ``PatternCompileError``.

    Already compiled patterns are returned as-is; ``flags`` only applies
    to pattern text.
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        raise PatternCompileError(pattern, str(exc)) from exc


class PatternRegistry:
    """Ordered handler table for one defining scope.

    ``scope`` is where named handlers get bound: a class, a module, or a
    mapping such as a module's ``globals()``. It may be ``None`` when no
    handler is ever registered with a name.
    """

    __slots__ = ("_cache", "_entries", "config", "scope")

    def __init__(
        self,
        scope: Any = None,
        config: DispatchConfig | None = None,
    ) -> None:
        self.scope = scope
        self.config = config or DispatchConfig()
        self._entries: list[HandlerEntry] = []
        self._cache: dict[str, Resolution] = {}

    def register(
        self,
        pattern: str | re.Pattern[str],
        handler: Callable[..., Any],
        name: str | None = None,
    ) -> Callable[..., Any]:
        """Append a handler for method names matching ``pattern``.

        When ``name`` is given the handler is also bound under that name in
        the scope, where it is called directly with nothing prepended.

        Returns ``handler`` unchanged. Raises ``PatternCompileError`` for an
        invalid pattern and ``ConfigurationError`` for a bad handler or
        name; in both cases the registry is left untouched.
        """
        compiled = compile_pattern(pattern, self.config.flags)

        if not callable(handler):
            msg = f"Handler for pattern {compiled.pattern!r} is not callable: {handler!r}"
            raise ConfigurationError(msg)

        if name is not None:
            self._check_bindable(name)

        entry = HandlerEntry(pattern=compiled, handler=handler, name=name)
        if name is not None:
            self._bind(name, handler)
        self._entries.append(entry)
        self._cache.clear()

        logger.debug(
            "Registered handler %s for pattern %r (#%d, scope=%s)",
            _describe(handler),
            compiled.pattern,
            len(self._entries),
            _scope_name(self.scope),
        )
        return handler

    def handler(
        self,
        pattern: str | re.Pattern[str],
        *,
        name: str | None = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a handler via decorator.

        Usage::

            @registry.handler(r"(\\w+)_(\\w+)")
            def verb_noun(verb, noun, *params):
                ...
        """

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            return self.register(pattern, func, name=name)

        return decorator

    def resolve(self, method_name: str) -> Resolution:
        """Find the first entry matching ``method_name``.

        Returns a ``BoundHandler`` carrying the prefix arguments, or
        ``NoMatch`` when no entry matches. Never raises.
        """
        if self.config.cache_resolutions:
            cached = self._cache.get(method_name)
            if cached is not None:
                return cached

        result = self._scan(method_name)
        if self.config.cache_resolutions:
            self._cache[method_name] = result
        return result

    def _scan(self, method_name: str) -> Resolution:
        mode = self.config.match_mode
        for index, entry in enumerate(self._entries):
            prefix = entry.match(method_name, mode)
            if prefix is not None:
                logger.debug(
                    "Resolved %r via pattern %r (#%d)",
                    method_name,
                    entry.pattern.pattern,
                    index + 1,
                )
                return BoundHandler(entry=entry, method_name=method_name, prefix=prefix)

        logger.debug("No handler matches %r", method_name)
        return NoMatch

    def module_getattr(self, name: str) -> BoundHandler:
        """Module-level ``__getattr__`` (PEP 562) backed by this registry.

        Usage, at the bottom of a module::

            __getattr__ = registry.module_getattr
        """
        result = self.resolve(name)
        if result is NoMatch:
            msg = f"module {_scope_name(self.scope)!r} has no attribute {name!r}"
            raise AttributeError(msg)
        return result

    @property
    def entries(self) -> tuple[HandlerEntry, ...]:
        """All registered entries, in declaration order."""
        return tuple(self._entries)

    def __iter__(self) -> Iterator[HandlerEntry]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PatternRegistry(scope={_scope_name(self.scope)}, entries={len(self._entries)})"

    # -- Named binding --------------------------------------------------------

    def _check_bindable(self, name: str) -> None:
        if not name.isidentifier():
            msg = f"Handler name {name!r} is not a valid identifier."
            raise ConfigurationError(msg)
        if self.scope is None:
            msg = (
                f"Cannot bind handler name {name!r}: registry has no scope. "
                "Pass scope= to PatternRegistry to enable named handlers."
            )
            raise ConfigurationError(msg)

    def _bind(self, name: str, handler: Callable[..., Any]) -> None:
        if isinstance(self.scope, MutableMapping):
            self.scope[name] = handler
        else:
            setattr(self.scope, name, handler)


def _describe(obj: Any) -> str:
    if obj is None:
        return "None"
    return getattr(obj, "__qualname__", None) or getattr(obj, "__name__", None) or repr(obj)


def _scope_name(scope: Any) -> str:
    if isinstance(scope, MutableMapping):
        return scope.get("__name__") or "<registry>"
    return getattr(scope, "__name__", None) or "<registry>"
