"""Module scope — pattern handlers for module-level names (PEP 562).

Names that are not defined in this module are resolved through the
registry, so ``from app import get_colour`` works without a ``def``.

Run:
    python app.py
"""

import logging

from autosub import DispatchConfig, PatternRegistry

registry = PatternRegistry(scope=globals(), config=DispatchConfig(cache_resolutions=True))

SETTINGS = {"colour": "blue", "size": "large"}


@registry.handler(r"^get_(\w+)$")
def _get(key, default=None):
    return SETTINGS.get(key, default)


@registry.handler(r"^set_(\w+)$", name="set_any")
def _set(key, value):
    SETTINGS[key] = value
    return value


__getattr__ = registry.module_getattr


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    print(registry.resolve("get_colour")())
    print(registry.resolve("set_shape")("round"))
    print(SETTINGS)
