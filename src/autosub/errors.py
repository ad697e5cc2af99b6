"""Autosub exception hierarchy.

Shared across the registry, the dispatch mixin, and the CLI so every
module raises and catches the same types.

A lookup that matches nothing is not an error; it returns ``NoMatch``
(see ``autosub.entry``).
"""


class AutosubError(Exception):
    """Base for all autosub-specific errors."""


class ConfigurationError(AutosubError):
    """Raised when a handler declaration or config value is invalid.

    Typically surfaces at class or module load time, when handlers are
    registered.
    """


class PatternCompileError(ConfigurationError):
    """A handler pattern is not a valid regular expression.

    Raised synchronously by ``PatternRegistry.register``. The registry
    is left unchanged.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid handler pattern {pattern!r}: {reason}")
