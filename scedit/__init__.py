"""Core of a small terminal text editor: configuration, buffer, declaration scanning and layout."""

__version__ = "1.1.0"

__all__ = ["buffer", "config", "declarations", "display", "editing", "options"]