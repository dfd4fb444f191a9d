"""protoscan - annotation-aware prototype detection for documented declarations."""

__version__ = "0.1.0"
