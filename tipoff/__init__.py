"""tipoff - basketball career simulation."""

__version__ = "0.1.0"
