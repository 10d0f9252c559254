"""HTML rendering of the converter form from a session snapshot.

The page is rendered on the server.  A short inline script sends the value
and selector events to the session endpoints and swaps in the re-rendered
error and results fragments.
"""

from __future__ import annotations

from html import escape

TITLE = "Convertisseur d'Unités Astronomiques"
VALUE_LABEL = "Valeur à convertir (unité sélectionnée ci-dessous)"
UNIT_LABEL = "Unité à convertir :"
RESULTS_HEADING = "Résultats de Conversion (approximations scientifiques) :"
SOURCES_HEADING = "Sources et Références :"

_STYLE = """
body { font-family: sans-serif; margin: 0; background: #0b1020; color: #e8ecf5; }
.container { display: flex; flex-wrap: wrap; gap: 2rem; padding: 2rem; }
.section { flex: 1 1 20rem; }
input, select { display: block; width: 100%; margin: .5rem 0 1rem; padding: .4rem; }
.error { color: #ff6b6b; }
.results ul, .sources ul { list-style: none; padding: 0; }
.value { font-family: monospace; margin-right: .75rem; }
"""

_SCRIPT = """
const valueInput = document.getElementById("valueInput");
const unitSelect = document.getElementById("unitSelect");

async function post(url, body) {
  const r = await fetch(url, {
    method: "POST",
    headers: {"Content-Type": "application/json"},
    body: JSON.stringify(body),
  });
  return r.json();
}

// Only the latest edit may update the page; partial text stays in the field.
let latest = 0;

valueInput.addEventListener("input", async (e) => {
  const seq = ++latest;
  const state = await post("/api/session/value", {value: e.target.value});
  if (seq !== latest) return;
  const error = document.getElementById("error");
  error.textContent = state.error;
  error.hidden = !state.error;
  const r = await fetch("/partials/results");
  const html = await r.text();
  if (seq !== latest) return;
  document.getElementById("results").innerHTML = html;
});

unitSelect.addEventListener("change", async (e) => {
  await post("/api/session/unit", {unit: e.target.value});
  window.location.reload();
});
"""


def render_results(state: dict) -> str:
    """Results list, or an empty string when there is nothing to show."""
    if not state["results"]:
        return ""
    items = "\n".join(
        f'<li><span class="value">{escape(r["formatted"])}</span>'
        f'<span class="unit-name">{escape(r["name"])}</span></li>'
        for r in state["results"]
    )
    return (
        '<div class="results">'
        f"<h3>{escape(RESULTS_HEADING)}</h3>"
        f"<ul>\n{items}\n</ul>"
        "</div>"
    )


def render_sources(state: dict) -> str:
    items = "".join(f"<li>{escape(source)}</li>" for source in state["sources"])
    return f'<div class="sources"><h3>{escape(SOURCES_HEADING)}</h3><ul>{items}</ul></div>'


def render_page(state: dict) -> str:
    """Full form page for the given session snapshot."""
    selected = state["selected_unit"]
    options = "\n".join(
        f'<option value="{escape(name)}"{" selected" if name == selected else ""}>'
        f"{escape(name)}</option>"
        for name in state["units"]
    )
    error = state["error"]
    error_hidden = "" if error else " hidden"
    placeholder = f"Entrez la valeur en {selected}"
    explanation = state["explanation"]
    value = state["value"]
    return f"""<!DOCTYPE html>
<html lang="fr">
<head>
<meta charset="utf-8">
<title>{escape(TITLE)}</title>
<style>{_STYLE}</style>
</head>
<body>
<div class="container">
  <div class="section input-section">
    <h1>{escape(TITLE)}</h1>
    <div class="unit">
      <h2>{escape(selected)}</h2>
      <p>{escape(explanation)}</p>
      <label for="valueInput">{escape(VALUE_LABEL)}</label>
      <input id="valueInput" type="text" inputmode="decimal" value="{escape(value)}"
             placeholder="{escape(placeholder)}">
      <p id="error" class="error"{error_hidden}>{escape(error)}</p>
      <label for="unitSelect">{escape(UNIT_LABEL)}</label>
      <select id="unitSelect">
{options}
      </select>
    </div>
  </div>
  <div class="section results-section">
    <div id="results">{render_results(state)}</div>
    {render_sources(state)}
  </div>
</div>
<script>{_SCRIPT}</script>
</body>
</html>
"""
