"""Graph algorithms, square matrices and a Coup game engine."""

__version__ = "0.1.0"