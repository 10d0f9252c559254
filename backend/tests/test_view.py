"""Tests for HTML rendering of the form."""

from html import escape

from astroconv.core.session import ConverterSession
from astroconv.core.validation import INVALID_INPUT_MESSAGE
from astroconv.ui.view import RESULTS_HEADING, TITLE, render_page, render_results


def _state(unit=None, value=None):
    session = ConverterSession()
    if unit is not None:
        session.on_unit_changed(unit)
    if value is not None:
        session.on_value_changed(value)
    return session.snapshot()


class TestRenderPage:
    def test_title_and_selector(self):
        html = render_page(_state())
        assert escape(TITLE) in html
        assert html.count("<option") == 7
        assert '<option value="Kilomètre (km)" selected>' in html

    def test_selected_unit_description(self):
        state = _state(unit="Parsec (pc)")
        html = render_page(state)
        assert "<h2>Parsec (pc)</h2>" in html
        assert escape(state["explanation"]) in html
        assert 'placeholder="Entrez la valeur en Parsec (pc)"' in html

    def test_error_shown(self):
        html = render_page(_state(value="abc"))
        assert f'<p id="error" class="error">{escape(INVALID_INPUT_MESSAGE)}</p>' in html

    def test_error_hidden_when_empty(self):
        html = render_page(_state())
        assert '<p id="error" class="error" hidden></p>' in html

    def test_sources_always_present(self):
        html = render_page(_state())
        assert "International Astronomical Union (2012)" in html
        assert "NASA – Units of Distance" in html

    def test_value_input_attributes(self):
        html = render_page(_state(value="3.5"))
        assert (
            '<input id="valueInput" type="text" inputmode="decimal" value="3.5"'
        ) in html

    def test_rejected_text_not_written_back(self):
        html = render_page(_state())
        assert "valueInput.value =" not in html

    def test_stale_responses_ignored(self):
        html = render_page(_state())
        assert html.count("if (seq !== latest) return;") == 2

    def test_no_results_without_value(self):
        html = render_page(_state())
        assert escape(RESULTS_HEADING) not in html


class TestRenderResults:
    def test_empty(self):
        assert render_results(_state()) == ""

    def test_lines(self):
        html = render_results(_state(unit="Unité Astronomique (UA)", value="1"))
        assert escape(RESULTS_HEADING) in html
        assert html.count("<li>") == 7
        assert (
            '<li><span class="value">149 597 870,7000</span>'
            '<span class="unit-name">Kilomètre (km)</span></li>'
        ) in html
