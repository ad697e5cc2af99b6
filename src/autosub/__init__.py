"""autosub — declare individual handlers for missing methods.

Instead of one catch-all ``__getattr__``, declare several handlers, each
answering the method names that match a regular expression. Handlers are
tried in declaration order and the first match wins.

Class scope::

    from autosub import AutoDispatch, autosub

    class Things(AutoDispatch):
        @autosub(r"^get_(\\w+)$")
        def _get(self, what, *params):
            return f"Getting {what}"

    Things().get_foo()  # "Getting foo"

Module scope::

    from autosub import PatternRegistry

    registry = PatternRegistry(scope=globals())

    @registry.handler(r"(\\w+)_(\\w+)")
    def _verb_noun(verb, noun, *params):
        ...

    __getattr__ = registry.module_getattr
"""

__version__ = "0.1.0"
__all__ = [
    "AutoDispatch",
    "AutosubError",
    "BoundHandler",
    "ConfigurationError",
    "DispatchConfig",
    "HandlerEntry",
    "NoMatch",
    "PatternCompileError",
    "PatternRegistry",
    "autosub",
    "can",
    "try_resolve",
]

_LAZY_IMPORTS: dict[str, str] = {
    "AutoDispatch": "autosub.dispatch",
    "AutosubError": "autosub.errors",
    "BoundHandler": "autosub.entry",
    "ConfigurationError": "autosub.errors",
    "DispatchConfig": "autosub.config",
    "HandlerEntry": "autosub.entry",
    "NoMatch": "autosub.entry",
    "PatternCompileError": "autosub.errors",
    "PatternRegistry": "autosub.registry",
    "autosub": "autosub.dispatch",
    "can": "autosub.dispatch",
    "try_resolve": "autosub.dispatch",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import autosub`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is not None:
        import importlib

        return getattr(importlib.import_module(module_path), name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
