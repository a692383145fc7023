"""GraphQL type-system model, type checks, input scalars and Relay ID helpers."""

__version__ = "0.1.0"

__all__ = [
    "definitions",
    "panics",
    "relay",
    "scalars",
    "suggestion",
    "typecheck",
]