"""A terminal maze game with seven mini-games that can also be played alone."""

__version__ = "1.0.0"