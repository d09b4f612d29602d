"""Greet someone from the command line."""

from greeter.greeting import InvocationArgs, greet

__version__ = "0.1.0"

__all__ = ["InvocationArgs", "greet", "__version__"]
