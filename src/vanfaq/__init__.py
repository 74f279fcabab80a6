"""Lexical retrieval engine behind the van-rental FAQ assistant."""

__version__ = "0.1.0"
