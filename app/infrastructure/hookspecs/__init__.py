"""Hook specifications for translation resolver plugins."""

from infrastructure.hookspecs import translations

__all__ = ["translations"]
