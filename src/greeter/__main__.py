"""Allow running the CLI with ``python -m greeter``."""

from greeter.cli import main

main(prog_name="cli")
