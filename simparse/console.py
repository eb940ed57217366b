# SimParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for SimParse output."""
from rich.console import Console

from simparse.themes import get_nord_theme

console = Console(color_system="truecolor", theme=get_nord_theme())
