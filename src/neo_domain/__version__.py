"""Version information for neo-domain."""

__version__ = "0.1.0"
