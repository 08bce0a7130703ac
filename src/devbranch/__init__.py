"""devbranch: development branch initializer for the mainboard repository."""

__version__ = "0.1.0"
