"""End-to-end parsing of whole ev lists."""

from pathlib import Path

from evtally.config import Settings
from evtally.ledger import CapacityExceeded, DuplicateId, InputUnavailable, MalformedInput, UnknownId
from evtally.pipeline import load_ledger, parse_text

EV_LIST = " b Bulbasaur c Charmander k Pikachu\nbhh cksss bkd\n"


class TestParseText:
    def test_full_run(self):
        outcome = parse_text(EV_LIST)
        assert outcome.ok
        ledger = outcome.ledger
        assert ledger.effort_values("b") == (2, 0, 1, 0, 0, 0)
        assert ledger.effort_values("c") == (0, 0, 0, 0, 0, 3)
        assert ledger.effort_values("k") == (0, 0, 1, 0, 0, 3)

    def test_crlf_line_endings(self):
        """Carriage returns end names and are skipped in both phases."""
        outcome = parse_text(" b Bulbasaur c Charmander\r\nbh\r\ncs\r\n")
        assert outcome.ok
        assert [entity.name for entity in outcome.ledger.entities()] == ["Bulbasaur", "Charmander"]
        assert outcome.ledger.effort_values("b") == (1, 0, 0, 0, 0, 0)
        assert outcome.ledger.effort_values("c") == (0, 0, 0, 0, 0, 1)

    def test_empty_declaration_then_reference(self):
        outcome = parse_text("\nbh")
        assert outcome.ledger is None
        assert outcome.error == UnknownId("b")

    def test_empty_declaration_and_tally(self):
        outcome = parse_text("\n")
        assert outcome.ok
        assert len(outcome.ledger) == 0

    def test_errors_discard_the_ledger(self):
        for text, expected in [
            (" b Bulbasaur b Ivysaur\n", DuplicateId("b")),
            (" b Bulbasaur\nzh", UnknownId("z")),
        ]:
            outcome = parse_text(text)
            assert not outcome.ok
            assert outcome.ledger is None
            assert outcome.error == expected

    def test_truncated_declaration(self):
        outcome = parse_text(" b")
        assert isinstance(outcome.error, MalformedInput)

    def test_capacity_from_settings(self):
        outcome = parse_text(EV_LIST, Settings(capacity=2))
        assert outcome.error == CapacityExceeded(2)


class TestLoadLedger:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "evlist.txt"
        path.write_text(EV_LIST, encoding="utf-8")
        outcome = load_ledger(path)
        assert outcome.ok
        assert outcome.ledger.ids() == ["b", "c", "k"]

    def test_windows_line_endings(self, tmp_path):
        path = tmp_path / "evlist.txt"
        path.write_bytes(b" b Bulbasaur\r\nbhh\r\n")
        outcome = load_ledger(path)
        assert outcome.ok
        assert outcome.ledger.get("b").name == "Bulbasaur"
        assert outcome.ledger.effort_values("b") == (2, 0, 0, 0, 0, 0)

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.txt"
        outcome = load_ledger(path)
        assert isinstance(outcome.error, InputUnavailable)
        assert outcome.error.path == str(path)
        assert outcome.ledger is None

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "evlist.txt"
        path.write_bytes(b" b Bulbasaur\nb\xff\xfeh")
        outcome = load_ledger(path, Settings(encoding="utf-8"))
        assert isinstance(outcome.error, MalformedInput)

    def test_unknown_encoding(self, tmp_path):
        path = tmp_path / "evlist.txt"
        path.write_text(EV_LIST, encoding="utf-8")
        settings = Settings()
        settings.encoding = "bogus"
        outcome = load_ledger(path, settings)
        assert isinstance(outcome.error, InputUnavailable)
        assert "bogus" in outcome.error.reason
