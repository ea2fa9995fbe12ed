"""
Data models for mdcover.
"""

from .search_results import SearchResult, SearchResponse
from .releases import Track, Medium, ReleaseDetail

__all__ = [
    'SearchResult',
    'SearchResponse',
    'Track',
    'Medium',
    'ReleaseDetail'
]
