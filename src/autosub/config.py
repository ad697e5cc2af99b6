"""Dispatch configuration.

DispatchConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from typing import Literal

from autosub.errors import ConfigurationError

MatchMode = Literal["search", "fullmatch"]

MATCH_MODES: frozenset[str] = frozenset({"search", "fullmatch"})


@dataclass(frozen=True, slots=True)
class DispatchConfig:
    """Per-registry dispatch configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = DispatchConfig(match_mode="fullmatch", cache_resolutions=True)
    """

    # "search" tests the pattern anywhere in the method name; anchor the
    # pattern (``^...$``) for a whole-name match. "fullmatch" always
    # requires the pattern to cover the whole name.
    match_mode: MatchMode = "search"

    # ``re`` flags applied when compiling string patterns
    flags: int = 0

    # Memoize resolve() per method name; cleared on every register()
    cache_resolutions: bool = False

    def __post_init__(self) -> None:
        if self.match_mode not in MATCH_MODES:
            allowed = ", ".join(sorted(MATCH_MODES))
            msg = f"Unknown match_mode {self.match_mode!r}. Expected one of: {allowed}"
            raise ConfigurationError(msg)
