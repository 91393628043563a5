"""
Exposes the version of geomaths
"""

__version__ = 'v0.1.0'

__all__ = ["__version__"]
