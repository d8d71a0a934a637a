"""Top-down arena shooter: survive waves of zombies, with a pygame front end."""

__version__ = "0.1.0"