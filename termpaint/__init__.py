"""Drawing in the terminal with the mouse and saving pictures as text."""

__version__ = "0.1.0"
__all__ = ["__version__"]