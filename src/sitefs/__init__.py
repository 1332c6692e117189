"""Filesystem content discovery for static-site builds."""

__all__ = ["__version__"]
__version__ = "0.3.0"
