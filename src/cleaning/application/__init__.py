"""
Application слой домена Cleaning.
"""

from .document_cleaner import DocumentCleaner

__all__ = ["DocumentCleaner"]
