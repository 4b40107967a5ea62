"""Grid bomber: a single-screen bomb-the-walls arcade game."""

__version__ = "1.0.0"
