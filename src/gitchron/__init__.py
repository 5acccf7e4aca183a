"""gitchron - chronological commit reports across repositories and branches."""

__version__ = "0.1.0"
