"""
Namer CLI - Deterministic, length-bounded names

Commands:
- namer compose - Join a base and suffix within a length limit
- namer limit - Shorten a single name within a length limit
- namer digest - Print the 8-character digest of a value
- namer version - Show version information
"""

from namer import __version__

__all__ = ["__version__"]
