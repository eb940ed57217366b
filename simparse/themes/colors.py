# SimParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color palettes and the Rich theme used by the SimParse console.

Every color constant also gets a bold variant with a `_b` suffix, generated by
`ColorsMeta`, so `OneColors.BLUE_b` is `"bold #61AFEF"`.
"""
from __future__ import annotations

from rich.theme import Theme


class ColorsMeta(type):
    """Adds a bold `<NAME>_b` attribute for every uppercase color constant."""

    def __new__(mcs, name, bases, namespace):
        bold = {
            f"{key}_b": f"bold {value}"
            for key, value in namespace.items()
            if key.isupper() and isinstance(value, str)
        }
        namespace.update(bold)
        return super().__new__(mcs, name, bases, namespace)


class OneColors(metaclass=ColorsMeta):
    """One Dark palette."""

    BLACK = "#282C34"
    GUTTER_GREY = "#4B5263"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    GREEN = "#98C379"
    CYAN = "#56B6C2"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"


class NordColors(metaclass=ColorsMeta):
    """Nord palette."""

    NORD0 = "#2E3440"
    NORD3 = "#4C566A"
    NORD4 = "#D8DEE9"
    NORD6 = "#ECEFF4"
    NORD8 = "#88C0D0"
    NORD9 = "#81A1C1"
    NORD10 = "#5E81AC"
    NORD11 = "#BF616A"
    NORD12 = "#D08770"
    NORD13 = "#EBCB8B"
    NORD14 = "#A3BE8C"
    NORD15 = "#B48EAD"


def get_nord_theme() -> Theme:
    """Return the Rich theme used by `simparse.console`."""
    return Theme(
        {
            "title": NordColors.NORD8_b,
            "command": NordColors.NORD8_b,
            "subcommand": NordColors.NORD9,
            "flag": NordColors.NORD13,
            "flag.value": NordColors.NORD14,
            "positional": NordColors.NORD15,
            "muted": NordColors.NORD3,
            "info": NordColors.NORD10,
            "warning": NordColors.NORD12_b,
            "error": NordColors.NORD11_b,
            "success": NordColors.NORD14_b,
        }
    )
