"""gutimer - terminal stopwatch, timer and countdown."""

__version__ = "0.3.0"
