"""Core building blocks for a text editor: key codes, keymaps, indentation, language detection, background jobs and git branch watching."""

__version__ = "0.1.0"