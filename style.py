"""Visual style constants — edit here to tweak the app's appearance."""

# ── Panes ─────────────────────────────────────────────────────────────────────
PANE_MIN_WIDTH = 160
PANE_TITLE_STYLE = "font-weight: bold; padding: 2px 0;"

# ── Name lists (groups, lists, items, picks) ──────────────────────────────────
LIST_BG = "#f5f5f5"
ROW_BG = "white"
ROW_BORDER = "#ddd"
ROW_SELECTED_BG = "#e3f2fd"
ROW_SELECTED_BORDER = "#90caf9"
ROW_BUTTON_WIDTH = 26
EMPTY_ITEM_LABEL = "(empty)"

# ── Group picks ───────────────────────────────────────────────────────────────
FROZEN_PICK_COLOR = "#4682b4"
SPINNING_PICK_COLOR = "#888"

# ── Item editor ───────────────────────────────────────────────────────────────
ITEM_EDIT_FOCUS_BG = "#fffde7"
ITEM_EDIT_FOCUS_BORDER = "#aaa"

# ── Buttons ───────────────────────────────────────────────────────────────────
BUTTON_HEIGHT = 28
DELETE_BUTTON_STYLE = "QPushButton { color: #b71c1c; }"
PURGE_BUTTON_STYLE = "QPushButton { color: white; background: #b71c1c; border-radius: 3px; }"

# ── Timer ─────────────────────────────────────────────────────────────────────
TICK_INTERVAL_MS = 100            # how often unfrozen picks respin
