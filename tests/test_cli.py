"""Tests for autosub.cli — CLI entrypoint, argument parsing, and commands."""

import sys
import types

import pytest

from autosub.cli import main
from autosub.dispatch import AutoDispatch, autosub
from autosub.registry import PatternRegistry


@pytest.fixture
def _fake_handlers_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with a registry and an AutoDispatch class."""
    mod = types.ModuleType("_fake_autosub_cli")
    registry = PatternRegistry(scope=mod)

    def _get(what, *params):
        return what

    def handle_foo_events(subname, *params):
        return subname

    registry.register(r"^get_(\w+)$", _get)
    registry.register(r"foo$", handle_foo_events, name="handle_foo_events")

    class Things(AutoDispatch):
        @autosub(r"^set_(\w+)_(\w+)$")
        def _set(self, adjective, noun):
            return adjective, noun

    class InheritsAll(Things):
        pass

    class Overrides(Things):
        @autosub(r"^set_(\w+)_(\w+)$")
        def _set_again(self, adjective, noun):
            return noun, adjective

    mod.registry = registry  # type: ignore[attr-defined]
    mod.empty = PatternRegistry()  # type: ignore[attr-defined]
    mod.Things = Things  # type: ignore[attr-defined]
    mod.InheritsAll = InheritsAll  # type: ignore[attr-defined]
    mod.Overrides = Overrides  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_autosub_cli", mod)


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_patterns_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["patterns", "--help"])
        assert exc_info.value.code == 0

    def test_resolve_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_patterns_missing_target(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["patterns"])
        assert exc_info.value.code == 2

    def test_resolve_missing_name(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "_fake_autosub_cli"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "autosub" in captured.out


@pytest.mark.usefixtures("_fake_handlers_module")
class TestPatternsCommand:
    def test_lists_entries_in_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["patterns", "_fake_autosub_cli:registry"])
        lines = capsys.readouterr().out.splitlines()

        assert "PATTERN" in lines[0]
        assert "HANDLER" in lines[0]
        assert r"^get_(\w+)$" in lines[2]
        assert "_get" in lines[2]
        assert "foo$" in lines[3]
        assert "(handle_foo_events)" in lines[3]

    def test_default_attribute(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["patterns", "_fake_autosub_cli"])
        assert r"^get_(\w+)$" in capsys.readouterr().out

    def test_autodispatch_class(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["patterns", "_fake_autosub_cli:Things"])
        out = capsys.readouterr().out
        assert r"^set_(\w+)_(\w+)$" in out
        assert "_set" in out

    def test_empty_registry(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["patterns", "_fake_autosub_cli:empty"])
        assert "No handlers registered." in capsys.readouterr().out

    def test_bad_target(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["patterns", "_fake_autosub_cli:missing"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


@pytest.mark.usefixtures("_fake_handlers_module")
class TestResolveCommand:
    def test_match(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "_fake_autosub_cli:registry", "get_widget"])
        out = capsys.readouterr().out

        assert out.startswith("get_widget -> ")
        assert r"pattern: ^get_(\w+)$" in out
        assert "prefix:  'widget'" in out

    def test_match_without_groups(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "_fake_autosub_cli:registry", "open_foo"])
        out = capsys.readouterr().out
        assert "handle_foo_events" in out
        assert "prefix:  'open_foo'" in out

    def test_no_match_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "_fake_autosub_cli:registry", "put_bar"])
        assert exc_info.value.code == 1
        assert "No handler matches 'put_bar'" in capsys.readouterr().err

    def test_missing_module(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "nonexistent_module_xyz:registry", "get_foo"])
        assert exc_info.value.code == 1


@pytest.mark.usefixtures("_fake_handlers_module")
class TestInheritedHandlers:
    def test_resolve_through_base_class(self, capsys: pytest.CaptureFixture[str]) -> None:
        mod = sys.modules["_fake_autosub_cli"]
        assert mod.InheritsAll().set_blue_cat() == ("blue", "cat")

        main(["resolve", "_fake_autosub_cli:InheritsAll", "set_blue_cat"])
        out = capsys.readouterr().out

        assert "Things._set" in out
        assert "owner:   _fake_handlers_module.<locals>.Things" in out
        assert "prefix:  'blue', 'cat'" in out

    def test_resolve_prefers_subclass_handler(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "_fake_autosub_cli:Overrides", "set_blue_cat"])
        out = capsys.readouterr().out

        assert "Overrides._set_again" in out
        assert "owner:   _fake_handlers_module.<locals>.Overrides" in out

    def test_resolve_no_match_on_subclass(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "_fake_autosub_cli:InheritsAll", "get_foo"])
        assert exc_info.value.code == 1
        assert "No handler matches 'get_foo'" in capsys.readouterr().err

    def test_patterns_lists_inherited_entries(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["patterns", "_fake_autosub_cli:InheritsAll"])
        out = capsys.readouterr().out

        assert "OWNER" in out
        assert r"^set_(\w+)_(\w+)$" in out
        assert "No handlers registered." not in out

    def test_patterns_in_dispatch_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["patterns", "_fake_autosub_cli:Overrides"])
        rows = capsys.readouterr().out.splitlines()[2:]

        assert len(rows) == 2
        assert "Overrides._set_again" in rows[0]
        assert "Things._set" in rows[1]
