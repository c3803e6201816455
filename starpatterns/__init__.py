"""Console star, number and letter patterns, with a prompting command line."""

__version__ = "0.1.0"
__all__ = ["__version__"]