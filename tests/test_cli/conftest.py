from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from simparse.themes import get_nord_theme

TOOLS_YAML = """
commands:
  - command: nvidia-smi
    global_options:
      - short: i
        long: id
        arguments: ID
      - short: q
        long: query
      - short: L
        long: list-gpus
    subcommands:
      - name: mig
        options:
          - flag: -lgip
  - command: dcgmi
    subcommands:
      - name: discovery
      - name: diag
        options:
          - short: r
            arguments: LEVEL
"""


@pytest.fixture
def test_console() -> Console:
    return Console(
        file=StringIO(),
        color_system=None,
        width=120,
        theme=get_nord_theme(),
        force_terminal=False,
    )


@pytest.fixture
def tools_config(tmp_path: Path) -> Path:
    path = tmp_path / "tools.yaml"
    path.write_text(TOOLS_YAML, encoding="UTF-8")
    return path
