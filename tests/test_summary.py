"""Tests for the run summary log."""

from spotcoach.session.summary import append_summary, format_summary
from spotcoach.solver.strategy import HeroStrategy


FLOP = HeroStrategy(("CHECK", "BET 25.000000"), (0.3, 0.7))
TURN = HeroStrategy(("CHECK",), (1.0,))


class TestFormatSummary:
    def test_flop_only(self):
        text = format_summary("AhKd", "Qs,Jh,2h", flop=FLOP)
        assert text == (
            "=== TUI RUN ===\n"
            "Hero: AhKd\n"
            "Flop: Qs,Jh,2h\n"
            "Flop strategy:\n"
            "  CHECK: 0.3000\n"
            "  BET 25.000000: 0.7000\n"
            "\n"
        )

    def test_streets_and_missing_strategies(self):
        text = format_summary("AhKd", "Qs,Jh,2h", "9d", "3c", flop=None, turn=TURN)
        lines = text.splitlines()
        assert "Turn: 9d" in lines
        assert "River: 3c" in lines
        assert "Flop strategy:" not in lines
        assert "Turn strategy:" in lines
        assert "  CHECK: 1.0000" in lines
        assert "River strategy:" not in lines


class TestAppendSummary:
    def test_creates_parents_and_appends(self, tmp_path):
        path = tmp_path / "outputs" / "summary.txt"
        append_summary(path, "AhKd", "Qs,Jh,2h", flop=FLOP)
        append_summary(path, "QhQs", "Qs,Jh,2h", "9d")

        text = path.read_text(encoding="utf-8")
        assert text.count("=== TUI RUN ===") == 2
        assert "Hero: QhQs" in text
        assert text.endswith("Turn: 9d\n\n")
