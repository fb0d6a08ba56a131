"""
"Hacker mode" stylesheet for the whole application.
Near-black background, neon green / neon blue accents, monospace everywhere.
"""

BG = "#0d0f14"
PANEL = "#171c26"
NEON = "#40ff8c"
NEON_2 = "#59bfff"
TEXT = "#e6e6e6"
TEXT_DIM = "#8c8f96"
DANGER = "#ff4d4d"

HACKER_STYLESHEET = f"""
/* ── Base ────────────────────────────────────────────────────────── */
QWidget {{
    background-color: {BG};
    color: {TEXT};
    font-family: "Menlo", "Consolas", "DejaVu Sans Mono", monospace;
    font-size: 13px;
}}

/* ── Buttons ─────────────────────────────────────────────────────── */
QPushButton {{
    background-color: {NEON};
    color: #000000;
    border: none;
    border-radius: 10px;
    padding: 8px 12px;
    font-weight: 700;
}}

QPushButton:pressed {{
    background-color: #2fbf69;
}}

QPushButton:disabled {{
    background-color: {PANEL};
    color: {TEXT_DIM};
}}

QPushButton#secondary {{
    background-color: {NEON_2};
}}

QPushButton#danger {{
    background-color: {DANGER};
}}

QPushButton#plain {{
    background: transparent;
    color: {TEXT_DIM};
    padding: 2px 6px;
    font-size: 15px;
}}

QPushButton#plain:checked {{
    color: {NEON};
}}

/* ── Input fields ────────────────────────────────────────────────── */
QLineEdit, QPlainTextEdit, QTextBrowser {{
    background-color: {PANEL};
    color: {TEXT};
    border: 1px solid #2a4d3a;
    border-radius: 10px;
    padding: 8px 10px;
    selection-background-color: {NEON};
    selection-color: #000000;
}}

QLineEdit:focus, QPlainTextEdit:focus {{
    border-color: {NEON};
}}

/* ── Labels ──────────────────────────────────────────────────────── */
QLabel {{
    background: transparent;
}}

QLabel#title {{
    font-size: 30px;
    font-weight: 900;
    color: {NEON};
}}

QLabel#chat_title {{
    font-size: 20px;
    font-weight: 900;
    color: {NEON};
}}

QLabel#subtitle {{
    font-size: 13px;
    font-weight: 600;
    color: {TEXT_DIM};
}}

QLabel#timer {{
    font-size: 40px;
    font-weight: 700;
    color: {NEON};
}}

QLabel#error {{
    font-size: 12px;
    font-weight: 600;
    color: {DANGER};
}}

QLabel#hint {{
    font-size: 11px;
    color: {TEXT_DIM};
}}

QLabel#task_done {{
    color: {TEXT_DIM};
    text-decoration: line-through;
}}

/* ── Tab Widget ──────────────────────────────────────────────────── */
QTabWidget::pane {{
    border: none;
    background-color: {BG};
}}

QTabBar::tab {{
    background-color: {PANEL};
    color: {TEXT_DIM};
    padding: 8px 20px;
    margin-right: 2px;
    border-top-left-radius: 8px;
    border-top-right-radius: 8px;
    font-weight: 700;
}}

QTabBar::tab:selected {{
    color: {NEON};
    border-bottom: 2px solid {NEON};
}}

/* ── Group Box ───────────────────────────────────────────────────── */
QGroupBox {{
    background-color: {PANEL};
    border: 1px solid #2a4d3a;
    border-radius: 14px;
    margin-top: 14px;
    padding: 14px;
    font-weight: 700;
}}

QGroupBox::title {{
    subcontrol-origin: margin;
    left: 12px;
    padding: 0 6px;
    color: {TEXT_DIM};
}}

/* ── SpinBox / CheckBox ──────────────────────────────────────────── */
QSpinBox {{
    background-color: {PANEL};
    border: 1px solid #2a4d3a;
    border-radius: 6px;
    padding: 4px 8px;
}}

QCheckBox {{
    spacing: 8px;
    font-weight: 600;
}}

QCheckBox::indicator:checked {{
    background-color: {NEON};
    border-radius: 4px;
}}
"""
