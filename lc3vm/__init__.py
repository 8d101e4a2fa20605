"""A virtual machine for the LC-3 educational computer architecture."""

__version__ = "1.0.0"