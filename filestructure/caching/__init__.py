"""
Caching support for filestructure.

Keeps built trees around so repeated loads of the same directory skip the
filesystem scan.
"""

from .loader import CachingTreeLoader

__all__ = ['CachingTreeLoader']
