import pytest

from simparse.registry import SchemaRegistry
from simparse.schema import CommandDefinition


@pytest.fixture
def nvidia_smi() -> CommandDefinition:
    return CommandDefinition.model_validate(
        {
            "command": "nvidia-smi",
            "category": "gpu_management",
            "global_options": [
                {"short": "i", "long": "id", "arguments": "ID"},
                {"short": "-q", "long": "--query"},
                {"long": "query-gpu=", "arguments": "FIELDS"},
            ],
            "subcommands": [
                {
                    "name": "mig",
                    "options": [
                        {"flag": "-lgip"},
                        {"flag": "-cgi", "arguments": "PROFILES"},
                    ],
                }
            ],
        }
    )


@pytest.fixture
def dcgmi() -> CommandDefinition:
    return CommandDefinition.model_validate(
        {
            "command": "dcgmi",
            "subcommands": [
                {"name": "discovery", "options": [{"short": "l", "long": "list"}]},
                {
                    "name": "diag",
                    "options": [
                        {"short": "r", "long": "run", "arguments": "LEVEL"},
                        {"short": "g", "long": "group", "arguments": "GROUP_ID"},
                    ],
                },
            ],
        }
    )


@pytest.fixture
def registry(nvidia_smi, dcgmi) -> SchemaRegistry:
    return SchemaRegistry([nvidia_smi, dcgmi])
