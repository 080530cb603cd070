"""Korean braille encoding for Hangul, Latin letters, numbers and symbols."""

__version__ = "0.1.0"