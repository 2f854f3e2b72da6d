"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout: a single column. Header on top, the scrollable conversation in
the middle, the input bar at the bottom. Toasts use Textual's default
toast rack in the bottom-right corner.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

/* Empty conversation placeholder */
#empty-state {
    width: 100%;
    height: auto;
    margin-top: 2;
    text-align: center;
    color: $text-muted;
}

/* ============================================
   Message Bubbles
   ============================================ */
MessageBubble {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 1;
}

.message-header {
    height: auto;
    text-style: bold;
}

.message-content {
    height: auto;
    padding: 0;
    margin: 0;
}

/* User messages - blue, header on the right */
MessageBubble.user-message {
    border-right: tall $accent;
    background: $accent 20%;

    & .message-header {
        color: $accent;
        text-align: right;
    }
}

/* Model messages - gray */
MessageBubble.model-message {
    border-left: tall $secondary;
    background: $secondary 10%;

    & .message-header {
        color: $secondary;
    }
}

/* Error messages - red outline */
MessageBubble.error-message {
    border: round $error;
    background: $error 12%;

    & .message-header {
        color: $error;
    }

    & .message-content {
        color: $text-error;
    }
}

/* ============================================
   Thinking Indicator
   ============================================ */
#thinking {
    height: 1;
    padding: 0 2;
    color: $text-muted;
    text-style: italic;
    display: none;

    &.-active {
        display: block;
    }
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    overflow-x: auto;
    scrollbar-gutter: stable;
}

/* ============================================
   Bottom Bar - Metrics + Input
   ============================================ */
#bottom-bar {
    height: auto;
    padding: 0 1;
    background: $panel;
    border-top: solid $border;
}

#metrics {
    height: 1;
    padding: 0 1;
    background: $surface;
    color: $foreground;
}

ChatInputBar {
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;

    &:focus {
        background: transparent;
    }

    &:disabled {
        color: $text-disabled;
    }
}

#send-btn {
    width: 10;
    height: 100%;
    margin: 0 0 0 1;
    min-width: 8;
    border: tall $primary;
    background: $primary;
    color: $background;
    text-style: bold;

    &:hover {
        background: $primary-lighten-1;
        border: tall $primary-lighten-1;
    }

    &:disabled {
        background: $primary 40%;
        border: tall $primary 40%;
    }
}

/* ============================================
   Notification Toasts
   ============================================ */
Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;

    &.-information {
        border: tall $primary;
        background: $primary 12%;
    }

    &.-error {
        border: tall $error;
        background: $error 12%;
    }

    &.-warning {
        border: tall $warning;
        background: $warning 12%;
    }
}

/* ============================================
   Header / Footer
   ============================================ */
Header {
    background: $primary;
    color: $background;
    height: 1;
}

HeaderTitle {
    text-style: bold;
}

Footer {
    background: $panel;
    height: auto;
}

/* ============================================
   Markdown Content Styling
   ============================================ */
Markdown {
    margin: 0;
    padding: 0;
}

MarkdownFence {
    background: $panel;
    border: round $border;
    margin: 1 0;
    padding: 1;
}

* {
    scrollbar-background: $panel;
    scrollbar-color: $surface-lighten-1;
    scrollbar-color-hover: $primary 50%;
    scrollbar-color-active: $primary;
    scrollbar-size: 1 1;
}
"""
