"""Image analysis: dimensions, pixel lookup and colour statistics, with a command line."""

__version__ = "1.0.1"