"""Convert an exported HTML memo archive into a chronological text file."""

__version__ = "0.1.0"
