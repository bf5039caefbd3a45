"""Smoke tests for the runnable examples."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

from textreader import Location

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


def _load(name: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(name, EXAMPLES_DIR / f"{name}.py")
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestQuickstart:
    """examples/quickstart.py tokenizes and reports locations."""

    def test_tokenize(self) -> None:
        """Tokens carry their starting location."""
        quickstart = _load("quickstart")

        tokens = quickstart.tokenize("a = 1\nbc=22")

        assert tokens == [
            ("WORD", "a", Location(0, 1, 0)),
            ("EQUALS", "=", Location(2, 1, 2)),
            ("NUMBER", "1", Location(4, 1, 4)),
            ("WORD", "bc", Location(6, 2, 0)),
            ("EQUALS", "=", Location(8, 2, 2)),
            ("NUMBER", "22", Location(9, 2, 3)),
        ]

    @pytest.mark.parametrize("source", ["", "   \n\t\n"])
    def test_tokenize_stops_at_end_of_input(self, source: str) -> None:
        """Empty and whitespace-only input produce no tokens."""
        quickstart = _load("quickstart")

        assert quickstart.tokenize(source) == []

    def test_tokenize_token_at_end_of_input(self) -> None:
        """A token running up to the end of input is emitted once."""
        quickstart = _load("quickstart")

        assert quickstart.tokenize("abc") == [("WORD", "abc", Location(0, 1, 0))]

    def test_lex_error_location(self) -> None:
        """Unexpected characters are reported at their own location."""
        quickstart = _load("quickstart")

        with pytest.raises(quickstart.LexError) as exc_info:
            quickstart.tokenize("ok\nx = $1")

        assert exc_info.value.location == Location(7, 2, 4)
        assert str(exc_info.value) == "2:5: Unexpected character '$'\nx = $1\n    ^"

    def test_main_runs(self, capsys: pytest.CaptureFixture[str]) -> None:
        """main() prints tokens and a diagnostic."""
        _load("quickstart").main()

        out = capsys.readouterr().out
        assert "WORD" in out
        assert "2:10: Unexpected character '$'" in out
