"""Snowball English stemming and a TF-IDF document ranking model."""

__version__ = "0.1.0"