"""Dictionary-based scoring of regulation corpora."""

__version__ = "0.1.0"
