"""A small interactive shell with pipelines, redirection, builtins and command suggestions."""

__version__ = "0.1.0"