"""
Aksara: anonymous thought board with a generic paginated entity store.
"""

__version__ = "0.1.0"
