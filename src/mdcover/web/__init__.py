"""
HTTP frontend for mdcover.
"""

from .app import create_app

__all__ = ['create_app']
