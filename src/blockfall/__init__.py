"""Blockfall: a falling-block puzzle engine with a gymnasium env and pygame front end."""

__version__ = "0.1.0"
