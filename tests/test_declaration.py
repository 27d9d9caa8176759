"""Tests for the pokemon declaration phase."""

import io

from evtally.ledger import CapacityExceeded, DuplicateId, EntityLedger, MalformedInput
from evtally.parser import CharStream, declaration_phase


def run_declaration(text: str, ledger: EntityLedger = None):
    ledger = ledger if ledger is not None else EntityLedger()
    stream = CharStream(io.StringIO(text))
    return declaration_phase(stream, ledger), ledger, stream


class TestDeclarationPhase:
    def test_registers_pokemon_in_order(self):
        error, ledger, _ = run_declaration(" b Bulbasaur c Charmander\n")
        assert error is None
        assert [(entity.id, entity.name) for entity in ledger.entities()] == [
            ("b", "Bulbasaur"),
            ("c", "Charmander"),
        ]

    def test_stops_at_newline(self):
        error, _, stream = run_declaration(" b Bulbasaur\nbh")
        assert error is None
        assert stream.read() == "b"

    def test_empty_declaration_is_valid(self):
        error, ledger, _ = run_declaration("\n")
        assert error is None
        assert len(ledger) == 0

    def test_extra_spaces_are_separators(self):
        error, ledger, _ = run_declaration("  b   Bulbasaur  c Charmander \n")
        assert error is None
        assert ledger.get("b").name == "Bulbasaur"
        assert ledger.get("c").name == "Charmander"

    def test_names_keep_punctuation(self):
        error, ledger, _ = run_declaration(" m Mr.Mime f Farfetch'd\n")
        assert error is None
        assert ledger.get("m").name == "Mr.Mime"
        assert ledger.get("f").name == "Farfetch'd"

    def test_duplicate_id(self):
        error, ledger, _ = run_declaration(" b Bulbasaur b Ivysaur\n")
        assert error == DuplicateId("b")
        assert len(ledger) == 1

    def test_empty_input_is_malformed(self):
        error, _, _ = run_declaration("")
        assert isinstance(error, MalformedInput)

    def test_missing_terminator_is_malformed(self):
        error, _, _ = run_declaration(" b Bulbasaur")
        assert isinstance(error, MalformedInput)

    def test_id_without_name_at_end_of_input(self):
        error, ledger, _ = run_declaration(" b")
        assert isinstance(error, MalformedInput)
        assert "'b'" in error.reason
        assert len(ledger) == 0

    def test_id_without_name_before_newline(self):
        error, _, _ = run_declaration(" b Bulbasaur c\n")
        assert isinstance(error, MalformedInput)

    def test_read_failure_is_malformed(self, broken_handle):
        ledger = EntityLedger()
        error = declaration_phase(CharStream(broken_handle(" b Bulb")), ledger)
        assert isinstance(error, MalformedInput)
        assert "input stream failed" in error.reason

    def test_capacity_exceeded(self):
        error, ledger, _ = run_declaration(" b Bulbasaur c Charmander\n", EntityLedger(capacity=1))
        assert error == CapacityExceeded(1)
        assert len(ledger) == 1
