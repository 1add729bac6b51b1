"""Fixed display palettes.

Colors are hex strings so they work both in Rich markup and Textual CSS.
"""

# Drawn at random for new lists
LIST_ICONS: tuple[str, ...] = ("📋", "✨", "🚀", "💡", "🎨", "📚")
LIST_COLORS: tuple[str, ...] = (
    "#818cf8",  # indigo
    "#fb923c",  # orange
    "#2dd4bf",  # teal
    "#facc15",  # yellow
    "#a78bfa",  # violet
    "#a3e635",  # lime
)

# Offered in the user management dialog, first entry is the default
USER_COLORS: tuple[str, ...] = (
    "#93c5fd",  # blue
    "#f9a8d4",  # pink
    "#86efac",  # green
    "#d8b4fe",  # purple
    "#fde047",  # yellow
    "#fca5a5",  # red
    "#a5b4fc",  # indigo
    "#fdba74",  # orange
    "#5eead4",  # teal
    "#67e8f9",  # cyan
)

# Sticky to-do notes
STICKY_COLORS: tuple[str, ...] = (
    "#fbcfe8",  # pink
    "#fef08a",  # yellow
    "#bbf7d0",  # green
    "#bfdbfe",  # blue
    "#e9d5ff",  # purple
)

DEFAULT_LIST_NAME = "My Tasks"
DEFAULT_LIST_ICON = "📋"
DEFAULT_LIST_COLOR = "#818cf8"

PRIORITY_COLORS: dict[str, str] = {
    "low": "#9ca3af",
    "medium": "#eab308",
    "high": "#ef4444",
}
