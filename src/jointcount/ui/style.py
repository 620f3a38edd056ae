"""QSS light theme for the assessment window."""

COLORS = {
    "bg": "#f7f8fa",
    "surface": "#ffffff",
    "border": "#d5d9e0",
    "text": "#1f2329",
    "text_dim": "#6b7280",
    "accent": "#2f855a",
}

LIGHT_THEME = """
/* ── Global ── */
QMainWindow, QWidget {
    background-color: %(bg)s;
    color: %(text)s;
    font-family: -apple-system, "Segoe UI", "Helvetica Neue", Arial, sans-serif;
    font-size: 12px;
}

/* ── Section Label ── */
QLabel#sectionLabel {
    color: %(accent)s;
    font-size: 11px;
    font-weight: 600;
    letter-spacing: 1px;
    padding: 4px 0px 2px 0px;
    border-bottom: 1px solid %(accent)s;
    margin-bottom: 4px;
}

/* ── Selection read-out ── */
QLabel#selectionLabel {
    color: %(text_dim)s;
    font-family: monospace;
    font-size: 11px;
}

/* ── Canvas placeholders ── */
QWidget[class~="jc"] {
    background-color: %(surface)s;
    border: 1px solid %(border)s;
}

QStatusBar {
    background-color: %(surface)s;
    color: %(text_dim)s;
    border-top: 1px solid %(border)s;
}
""" % COLORS
