"""Tests for the converter session state machine."""

import pytest
from astroconv.core import session as session_module
from astroconv.core.catalog import ALL_UNITS, UnknownUnitError
from astroconv.core.formatting import format_number
from astroconv.core.session import ConverterSession
from astroconv.core.validation import INVALID_INPUT_MESSAGE


@pytest.fixture
def session():
    return ConverterSession()


class TestDefaults:
    def test_initial_state(self, session):
        assert session.raw_value == ""
        assert session.error == ""
        assert session.selected_unit.name == "Kilomètre (km)"
        assert session.results == []


class TestValueChanged:
    def test_valid_value(self, session):
        session.on_value_changed("3.5")
        assert session.raw_value == "3.5"
        assert session.error == ""
        assert len(session.results) == len(ALL_UNITS)

    def test_invalid_value_clears(self, session):
        session.on_value_changed("12")
        session.on_value_changed("abc")
        assert session.raw_value == ""
        assert session.error == INVALID_INPUT_MESSAGE
        assert session.results == []

    def test_negative_value(self, session):
        session.on_value_changed("-5")
        assert session.error == INVALID_INPUT_MESSAGE
        assert session.raw_value == ""

    def test_error_cleared_by_valid_value(self, session):
        session.on_value_changed("")
        session.on_value_changed("7")
        assert session.error == ""
        assert session.raw_value == "7"

    def test_zero_gives_full_zero_list(self, session):
        session.on_value_changed("0")
        results = session.results
        assert len(results) == len(ALL_UNITS)
        assert all(format_number(r.value) == "0,0000" for r in results)


class TestUnitChanged:
    def test_clears_value_and_error(self, session):
        session.on_value_changed("12")
        session.on_unit_changed("Parsec (pc)")
        assert session.selected_unit.name == "Parsec (pc)"
        assert session.raw_value == ""
        assert session.error == ""
        assert session.results == []

    def test_clears_error(self, session):
        session.on_value_changed("oops")
        session.on_unit_changed("Rayon solaire (R☉)")
        assert session.error == ""

    def test_unknown_unit(self, session):
        session.on_value_changed("12")
        with pytest.raises(UnknownUnitError):
            session.on_unit_changed("Furlong")
        assert session.selected_unit.name == "Kilomètre (km)"
        assert session.raw_value == "12"

    def test_reset(self, session):
        session.on_unit_changed("Parsec (pc)")
        session.on_value_changed("1")
        session.reset()
        assert session.selected_unit.name == "Kilomètre (km)"
        assert session.raw_value == ""
        assert session.results == []


class TestEndToEnd:
    def test_one_astronomical_unit(self, session):
        session.on_unit_changed("Unité Astronomique (UA)")
        session.on_value_changed("1")
        formatted = {r.name: format_number(r.value) for r in session.results}
        assert formatted["Kilomètre (km)"] == "149 597 870,7000"
        assert formatted["Année-Lumière (al)"] == "0,0000"
        assert formatted["Unité Astronomique (UA)"] == "1,0000"

    def test_tie_in_kilometres_rounds_up(self, session):
        session.on_value_changed("0.03125")
        formatted = {r.name: format_number(r.value) for r in session.results}
        assert formatted["Kilomètre (km)"] == "0,0313"

    def test_snapshot(self, session):
        session.on_unit_changed("Unité Astronomique (UA)")
        session.on_value_changed("1")
        snap = session.snapshot()
        assert snap["selected_unit"] == "Unité Astronomique (UA)"
        assert snap["value"] == "1"
        assert snap["error"] == ""
        assert snap["units"] == [u.name for u in ALL_UNITS]
        assert snap["results"][0] == {
            "name": "Kilomètre (km)",
            "value": pytest.approx(149_597_870.7),
            "formatted": "149 597 870,7000",
        }
        assert "International Astronomical Union (2012)" in snap["sources"]


class TestMemoization:
    def test_reuses_results_until_input_changes(self, session, monkeypatch):
        calls = []
        real_convert = session_module.convert

        def counting_convert(value, unit):
            calls.append((value, unit.name))
            return real_convert(value, unit)

        monkeypatch.setattr(session_module, "convert", counting_convert)

        session.on_value_changed("2")
        session.results
        session.results
        assert len(calls) == 1

        session.on_value_changed("3")
        session.results
        assert calls[-1] == (3.0, "Kilomètre (km)")
        assert len(calls) == 2

        session.on_unit_changed("Parsec (pc)")
        session.on_value_changed("3")
        session.results
        assert calls[-1] == (3.0, "Parsec (pc)")
        assert len(calls) == 3

    def test_results_copy_not_shared(self, session):
        session.on_value_changed("2")
        session.results.clear()
        assert len(session.results) == len(ALL_UNITS)
