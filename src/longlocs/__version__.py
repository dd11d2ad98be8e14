"""Version information for longlocs."""

__version__ = "0.1.0"
