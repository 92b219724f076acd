from html import escape

from htmllog.date_format import format_log_datetime

FILTER_TYPES = ("INFO", "DEBUG", "WARNING", "ERROR")
REFRESH_SECONDS = (0, 5, 10, 20, 30)

STYLE = """
.INFO { color: green; }
.ERROR { color: red; }
.DEBUG { color: #0790b9; }
.WARNING { color: #c9a400; }
.controls { position: fixed; right: 50px; padding: 6px; background-color: #e2e2e2; }
"""

SCRIPT = """
function changeConfig() {
  var checks = {INFO: "infocheck", DEBUG: "debugcheck", WARNING: "warningcheck", ERROR: "errorcheck"};
  Object.keys(checks).forEach(function (type) {
    var shown = document.getElementById(checks[type]).checked;
    document.querySelectorAll("div.islog." + type).forEach(function (el) {
      el.style.display = shown ? "" : "none";
    });
  });

  var refresh = document.getElementById("refreshconfig").value;
  if (window.autoRefreshInterval !== undefined) {
    clearInterval(window.autoRefreshInterval);
  }
  if (Number(refresh) > 0) {
    window.autoRefreshInterval = setInterval(function () { location.reload(); }, Number(refresh) * 1000);
  }
  localStorage.refreshConfig = refresh;

  var hideEmpty = document.getElementById("hidecategoriescheck").checked;
  document.querySelectorAll("div.section").forEach(function (section) {
    section.style.display = "";
    if (!hideEmpty) {
      return;
    }
    var visible = Array.prototype.some.call(section.querySelectorAll("div.islog"), function (el) {
      return el.style.display !== "none";
    });
    if (!visible) {
      section.style.display = "none";
    }
  });
}

document.addEventListener("DOMContentLoaded", function () {
  var saved = localStorage.refreshConfig;
  if (saved !== undefined && saved !== "0") {
    var option = document.querySelector('#refreshconfig option[value="' + saved + '"]');
    if (option) {
      option.selected = true;
    }
  }
  changeConfig();
});
"""


def _refresh_options():
    rows = []
    for seconds in REFRESH_SECONDS:
        label = "No auto-refresh" if seconds == 0 else f"Refresh every {seconds} seconds"
        rows.append(f"<option value='{seconds}'>{label}</option>")
    return "\n".join(rows)


def _filter_checks():
    return "\n".join(
        f"<div><input type='checkbox' id='{t.lower()}check' checked onchange='changeConfig()' />Show {t} logs</div>"
        for t in FILTER_TYPES
    )


def _toc_rows(sections):
    if not sections:
        return "<li>-</li>"
    return "\n".join(
        f"<li><a href='#{escape(s['key'], quote=True)}'>{escape(s['name'])}</a></li>"
        for s in sections.values()
    )


def _entry_rows(logs):
    return "\n".join(
        f"<div class='{entry['type']} islog'>{entry['type']} ({escape(entry['dateTime'])}): {escape(entry['value'])}</div>"
        for entry in logs
    )


def _section_block(section):
    elapsed = section.get("elapsed", "")
    elapsed_row = f"<p>Elapsed: {elapsed} ms</p>" if elapsed != "" else ""
    return f"""
<div class='section'>
<h2 id='{escape(section['key'], quote=True)}' style='display: inline-block;'>{escape(section['name'])}</h2>
<p style='display: inline-block; padding-left: 20px;'>(<a href='#summary'>Return to summary</a>)</p>
<p>Started at: {format_log_datetime(section['start'])}</p>
<p>Finished at: {format_log_datetime(section['end'])}</p>
{elapsed_row}
{_entry_rows(section['logs'])}
</div>
"""


def render_document(logger):
    """Render the whole logger state as one self-contained html page.

    Reads logger.title, description, start, end and sections; changes nothing.
    """
    title = escape(logger.title)
    started = format_log_datetime(logger.start)
    finished = format_log_datetime(logger.end)
    sections = "".join(_section_block(s) for s in logger.sections.values())

    return f"""<!doctype html>
<html>
<head>
<meta charset='utf-8'>
<title>{title} - {started}</title>
<style>{STYLE}</style>
<script>{SCRIPT}</script>
</head>
<body>
<h1>{title} log</h1>
<p>{escape(logger.description)}</p>
<h2 id='summary'>Summary</h2>
<p>Started at: {started}</p>
<p>Finished at: {finished}</p>
<div class='controls'>
<div>
<select id='refreshconfig' onchange='changeConfig()'>
{_refresh_options()}
</select>
</div>
<div><input type='checkbox' id='hidecategoriescheck' onchange='changeConfig()' /> Do not show empty categories</div>
{_filter_checks()}
</div>
<h2>Sections of this report</h2>
<ul>
{_toc_rows(logger.sections)}
</ul>
{sections}
</body>
</html>
"""
