import json
from pathlib import Path

import pytest

from simparse.config import find_config, load_definitions, load_registry
from simparse.exceptions import ConfigError, DuplicateCommandError

YAML_CONFIG = """
commands:
  - command: nvidia-smi
    global_options:
      - short: i
        long: id
        arguments: ID
      - short: q
        long: query
  - command: dcgmi
    subcommands:
      - name: diag
        options:
          - short: r
            arguments: LEVEL
"""

TOML_CONFIG = """
command = "ibstat"
description = "Query InfiniBand devices"

[[global_options]]
short = "l"
long = "list_of_cas"

[[global_options]]
short = "p"
long = "port"
arguments = "PORT"
"""


@pytest.fixture
def yaml_file(tmp_path: Path) -> Path:
    path = tmp_path / "tools.yaml"
    path.write_text(YAML_CONFIG, encoding="UTF-8")
    return path


@pytest.fixture
def toml_file(tmp_path: Path) -> Path:
    path = tmp_path / "ibstat.toml"
    path.write_text(TOML_CONFIG, encoding="UTF-8")
    return path


def test_load_yaml_definitions(yaml_file):
    definitions = load_definitions(yaml_file)
    assert [definition.command for definition in definitions] == ["nvidia-smi", "dcgmi"]
    assert definitions[1].subcommands[0].options[0].arguments == "LEVEL"


def test_load_toml_single_definition(toml_file):
    (definition,) = load_definitions(toml_file)
    assert definition.command == "ibstat"
    assert definition.flag_names() == ["l", "list_of_cas", "p", "port"]


def test_load_json_definition(tmp_path):
    path = tmp_path / "mlxconfig.json"
    path.write_text(
        json.dumps(
            {"command": "mlxconfig", "global_options": [{"short": "d", "arguments": "DEV"}]}
        ),
        encoding="UTF-8",
    )
    (definition,) = load_definitions(str(path))
    assert definition.command == "mlxconfig"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_definitions(tmp_path / "missing.yaml")


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "tools.ini"
    path.write_text("[nvidia-smi]\n", encoding="UTF-8")
    with pytest.raises(ConfigError, match="Unsupported config format"):
        load_definitions(path)


def test_malformed_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("commands: [unclosed\n", encoding="UTF-8")
    with pytest.raises(ConfigError, match="Could not parse"):
        load_definitions(path)


@pytest.mark.parametrize("name", ["tools.yaml", "tools.toml", "tools.json"])
def test_non_utf8_file(tmp_path, name):
    path = tmp_path / name
    path.write_bytes(b"\xff\xfecommand: nvidia-smi\n")
    with pytest.raises(ConfigError, match="not valid UTF-8"):
        load_definitions(path)


@pytest.mark.parametrize(
    "content",
    [
        "- command: nvidia-smi\n",
        "title: nothing here\n",
        "",
    ],
)
def test_wrong_top_level_shape(tmp_path, content):
    path = tmp_path / "tools.yaml"
    path.write_text(content, encoding="UTF-8")
    with pytest.raises(ConfigError, match="must contain a command definition"):
        load_definitions(path)


def test_commands_must_be_a_list(tmp_path):
    path = tmp_path / "tools.yaml"
    path.write_text("commands:\n  command: nvidia-smi\n", encoding="UTF-8")
    with pytest.raises(ConfigError, match="must be a list"):
        load_definitions(path)


def test_entries_must_be_mappings(tmp_path):
    path = tmp_path / "tools.yaml"
    path.write_text("commands:\n  - nvidia-smi\n", encoding="UTF-8")
    with pytest.raises(ConfigError, match="not a mapping"):
        load_definitions(path)


def test_invalid_definition_names_the_file(tmp_path):
    path = tmp_path / "tools.yaml"
    path.write_text("commands:\n  - description: no name\n", encoding="UTF-8")
    with pytest.raises(ConfigError, match="tools.yaml"):
        load_definitions(path)


def test_load_registry_from_files_and_directories(tmp_path, yaml_file, toml_file):
    (tmp_path / "notes.txt").write_text("ignored", encoding="UTF-8")
    registry = load_registry(tmp_path)
    assert registry.command_names() == ["dcgmi", "ibstat", "nvidia-smi"]

    registry = load_registry(yaml_file)
    assert registry.parse("nvidia-smi -q mig").flags["q"] is True


def test_load_registry_duplicate_commands(tmp_path, yaml_file):
    other = tmp_path / "more.yaml"
    other.write_text("command: dcgmi\n", encoding="UTF-8")
    with pytest.raises(DuplicateCommandError):
        load_registry(yaml_file, other)


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.delenv("SIMPARSE_CONFIG", raising=False)
    monkeypatch.chdir(work)
    return work, home


def test_find_config_none(isolated_cwd):
    assert find_config() is None


def test_find_config_in_cwd(isolated_cwd):
    work, _ = isolated_cwd
    (work / "simparse.toml").write_text(TOML_CONFIG, encoding="UTF-8")
    found = find_config()
    assert found is not None
    assert found.resolve() == (work / "simparse.toml").resolve()


def test_find_config_from_environment(isolated_cwd, tmp_path, monkeypatch):
    custom = tmp_path / "custom.yaml"
    custom.write_text(YAML_CONFIG, encoding="UTF-8")
    monkeypatch.setenv("SIMPARSE_CONFIG", str(custom))
    assert find_config() == custom


def test_find_config_in_home(isolated_cwd):
    _, home = isolated_cwd
    config_dir = home / ".config" / "simparse"
    config_dir.mkdir(parents=True)
    (config_dir / "simparse.yaml").write_text(YAML_CONFIG, encoding="UTF-8")
    assert find_config() == config_dir / "simparse.yaml"
