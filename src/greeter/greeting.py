"""Greeting logic."""

from dataclasses import dataclass
from typing import Optional

DEFAULT_GREETING = "Hello, world!"


@dataclass(frozen=True)
class InvocationArgs:
    """Arguments parsed from the command line."""

    name: Optional[str] = None


def greet(args: InvocationArgs) -> str:
    """Return the greeting line for the given arguments.

    An empty name is greeted as-is; only an absent name falls back to the
    default greeting.
    """
    if args.name is None:
        return DEFAULT_GREETING
    return f"Hello, {args.name}!"
