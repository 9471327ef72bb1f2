"""Fetch, track and reuse Go packages across projects."""

__version__ = "0.1.0"
__all__ = ["__version__"]