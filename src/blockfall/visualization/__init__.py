"""Pygame front end: renderer and keyboard-driven play loop."""
