"""A two-player card table of twelve month colours, shown in a pygame window."""

__version__ = "0.1.0"