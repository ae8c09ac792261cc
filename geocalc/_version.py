"""
Exposes the version of geocalc
"""

__version__ = 'v0.1.0'
