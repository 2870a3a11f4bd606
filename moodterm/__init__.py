"""A graphical terminal toy whose colours follow its mood."""

__version__ = "1.0.0"
__all__ = ["__version__"]