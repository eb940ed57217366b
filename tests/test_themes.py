from rich.style import Style

from simparse.themes import NordColors, OneColors, get_nord_theme


def test_bold_variants():
    assert OneColors.BLUE_b == "bold #61AFEF"
    assert NordColors.NORD8_b == f"bold {NordColors.NORD8}"


def test_nord_theme_styles():
    theme = get_nord_theme()
    for name in ("command", "subcommand", "flag", "flag.value", "positional", "error"):
        assert isinstance(theme.styles[name], Style)
