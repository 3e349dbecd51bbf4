"""Load, validate, flood-fill and print .cub grid maps; read XPM sprites."""

__version__ = "0.1.0"

__all__ = ["__version__"]