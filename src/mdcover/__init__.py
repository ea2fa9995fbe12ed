"""
mdcover - MiniDisc cover creator backend.
"""

__version__ = "1.0.0"
