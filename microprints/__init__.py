"""Vowel and consonant-cluster profiles of text, with string, CSV and tree helpers."""

__version__ = "0.1.0"
__all__ = ["charstar", "csvline", "tree", "microprints"]