"""Load, sort, analyse and save student grade records kept in CSV files."""

__version__ = "0.1.0"