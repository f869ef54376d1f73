"""Local sphere cache: index store and file naming."""

from .naming import is_plain_filename, sphere_filename_for_id
from .store import CacheIndexStore

__all__ = ["CacheIndexStore", "is_plain_filename", "sphere_filename_for_id"]
