"""Color themes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Rich color names used when drawing surfaces."""

    name: str
    bg: str
    fg: str
    border: str
    border_focused: str
    hl_bg: str
    solid: str
    trusted: str
    remake: str


THEMES = [
    Theme(
        name="Default",
        bg="black",
        fg="white",
        border="grey50",
        border_focused="bright_white",
        hl_bg="grey23",
        solid="white",
        trusted="green",
        remake="red",
    ),
    Theme(
        name="Dracula",
        bg="#282a36",
        fg="#f8f8f2",
        border="#6272a4",
        border_focused="#bd93f9",
        hl_bg="#44475a",
        solid="#f8f8f2",
        trusted="#50fa7b",
        remake="#ff5555",
    ),
    Theme(
        name="Gruvbox",
        bg="#282828",
        fg="#ebdbb2",
        border="#928374",
        border_focused="#fabd2f",
        hl_bg="#504945",
        solid="#ebdbb2",
        trusted="#b8bb26",
        remake="#fb4934",
    ),
    Theme(
        name="Catppuccin Macchiato",
        bg="#24273a",
        fg="#cad3f5",
        border="#6e738d",
        border_focused="#c6a0f6",
        hl_bg="#363a4f",
        solid="#cad3f5",
        trusted="#a6da95",
        remake="#ed8796",
    ),
]


def get_theme(name: str) -> Theme:
    """Theme by name, falling back to the first one."""
    for theme in THEMES:
        if theme.name == name:
            return theme
    return THEMES[0]
