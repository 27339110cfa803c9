"""Small implementations of classic design patterns and type utilities."""

__version__ = "0.1.0"

__all__ = [
    "checkpoints",
    "comparable",
    "expressions",
    "log",
    "sets",
    "typelist",
    "typemap",
    "users",
]