"""Create a dated folder with an empty OpenDocument text file."""

__version__ = "0.1.0"
