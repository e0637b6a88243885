from bmdata.bookmark import decode
from bmdata.errors import BadBookmarkData, BadHeader, BookmarkError
from bmdata.structs import BookmarkData

__author__ = 'yk'
__version__ = '0.3.0'

__all__ = ['decode', 'BookmarkData', 'BookmarkError', 'BadHeader', 'BadBookmarkData']
