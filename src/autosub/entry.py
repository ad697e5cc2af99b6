"""HandlerEntry, BoundHandler, and the NoMatch sentinel."""

import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any, Final

from autosub.config import MatchMode


class _NoMatchType:
    """Type of the ``NoMatch`` singleton. Falsy, compares by identity."""

    __slots__ = ()
    _instance: "_NoMatchType | None" = None

    def __new__(cls) -> "_NoMatchType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NoMatch"

    def __reduce__(self) -> str:
        return "NoMatch"


NoMatch: Final = _NoMatchType()


@dataclass(frozen=True, slots=True)
class HandlerEntry:
    """A frozen (pattern, handler) pair.

    Created by ``PatternRegistry.register``, never removed.
    """

    pattern: re.Pattern[str]
    handler: Callable[..., Any]
    name: str | None = None

    @property
    def groups(self) -> int:
        """Number of capturing groups in the pattern."""
        return self.pattern.groups

    def match(self, method_name: str, mode: MatchMode = "search") -> tuple[Any, ...] | None:
        """Match ``method_name`` and return the prefix arguments, or ``None``.

        Prefix arguments are the captured groups in group order. When the
        pattern has no groups, or group 1 did not take part in the match,
        the whole method name is the single prefix argument. A later group
        that did not take part yields ``None``.
        """
        if mode == "fullmatch":
            m = self.pattern.fullmatch(method_name)
        else:
            m = self.pattern.search(method_name)
        if m is None:
            return None

        captured = m.groups()
        if not captured or captured[0] is None:
            return (method_name,)
        return captured


@dataclass(frozen=True, slots=True)
class BoundHandler:
    """Result of a successful resolution: a handler with its prefix arguments.

    Calling it prepends the prefix to the call arguments::

        resolved = registry.resolve("jump_up")
        resolved("one", "two")  # handler("jump", "up", "one", "two")

    ``bind(receiver)`` returns a copy that behaves like a method, with the
    receiver ahead of the prefix: ``handler(receiver, *prefix, *args)``.
    """

    entry: HandlerEntry
    method_name: str
    prefix: tuple[Any, ...]
    receiver: Any = None
    bound: bool = False

    @property
    def handler(self) -> Callable[..., Any]:
        return self.entry.handler

    def bind(self, receiver: Any) -> "BoundHandler":
        return replace(self, receiver=receiver, bound=True)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self.bound:
            return self.entry.handler(self.receiver, *self.prefix, *args, **kwargs)
        return self.entry.handler(*self.prefix, *args, **kwargs)
