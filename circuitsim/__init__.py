"""Console simulator of digital integrated circuits and small companion command-line tools."""

__version__ = "0.1.0"
__all__ = ["__version__"]