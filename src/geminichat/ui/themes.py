"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Indigo palette: indigo header and accents, blue user bubbles, gray
# model bubbles, red error bubbles.
GEMINI_INDIGO = Theme(
    name="gemini-indigo",
    primary="#6366f1",      # Indigo 500 - title, borders, send button
    secondary="#94a3b8",    # Slate 400 - model bubbles
    accent="#3b82f6",       # Blue 500 - user bubbles
    foreground="#e5e7eb",   # Gray 200
    background="#111827",   # Gray 900
    success="#34d399",      # Emerald 400
    warning="#fbbf24",      # Amber 400
    error="#f87171",        # Red 400 - error bubbles and toasts
    surface="#1f2937",      # Gray 800
    panel="#18202f",
    dark=True,
    variables={
        "block-cursor-foreground": "#111827",
        "block-cursor-background": "#a5b4fc",
        "block-cursor-text-style": "bold",
        "input-cursor-background": "#e5e7eb",
        "input-cursor-foreground": "#111827",
        "input-selection-background": "#6366f1 30%",

        "border": "#374151",
        "border-blurred": "#1f2937",

        "scrollbar": "#374151",
        "scrollbar-hover": "#4b5563",
        "scrollbar-active": "#6366f1",
        "scrollbar-background": "#18202f",
        "scrollbar-corner-color": "#18202f",

        "footer-foreground": "#d1d5db",
        "footer-background": "#111827",
        "footer-key-foreground": "#a5b4fc",
        "footer-key-background": "#1f2937",
        "footer-description-foreground": "#9ca3af",

        "text-muted": "#6b7280",
        "text-disabled": "#4b5563",
        "text-error": "#f87171",
        "text-primary": "#a5b4fc",

        "button-foreground": "#e5e7eb",
        "button-color-foreground": "#111827",
        "button-focus-text-style": "bold reverse",
    },
)
