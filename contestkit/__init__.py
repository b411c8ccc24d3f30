"""Programming-contest problem solutions as callable Python functions."""

__version__ = "0.1.0"