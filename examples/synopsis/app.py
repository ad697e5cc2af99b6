"""Synopsis — pattern handlers on a class.

Demonstrates handlers with captured groups, a handler without groups
that receives the whole method name, a named handler, and ``can``.

Run:
    python app.py
"""

from autosub import AutoDispatch, autosub, can


class Catalog(AutoDispatch):
    @autosub(r"^get_(\w+)$")
    def _get(self, what, *params):
        return f"Getting {what}..."

    @autosub(r"^set_(\w+)_(\w+)$")
    def _set(self, adjective, noun, *params):
        return f"Setting the {adjective} {noun}"

    @autosub(r"(\w+)_(\w+)", name="add")
    def add(self, verb, noun, one=0, two=0):
        return one + two

    @autosub(r"foo$", name="handle_foo_events")
    def handle_foo_events(self, subname, *params):
        return f"Called {subname} to do something to a foo"


if __name__ == "__main__":
    catalog = Catalog()
    print(catalog.get_foo())
    print(catalog.set_blue_cat())
    print(catalog.jump_up(1, 2))
    print(catalog.add(None, None, 1, 2))
    if can(Catalog, "set_blue_cat"):
        print("Catalog can set_blue_cat")
