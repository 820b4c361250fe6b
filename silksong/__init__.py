"""A musical puzzle game of growing activators and notes played by angle."""

__version__ = "0.1.0"