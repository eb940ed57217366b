import logging

from simparse import get_flag_string, has_flag, parse
from simparse.config import load_registry
from simparse.render import print_parsed_command
from simparse.utils import setup_logging

setup_logging(console_log_level=logging.DEBUG)

# Heuristic parsing: -q swallows "mig" because nothing says it is boolean.
print_parsed_command(parse("nvidia-smi -q mig"))

# Schema-aware parsing via command definitions.
registry = load_registry("examples/tools.yaml")
parsed = registry.parse("nvidia-smi -q mig -i 0")
print_parsed_command(parsed)

if has_flag(parsed, "i", "id"):
    print(f"Target GPU: {get_flag_string(parsed, ['i', 'id'])}")

print_parsed_command(registry.parse('dcgmi diag -r 2 -g 0 --note "nightly run"'))
