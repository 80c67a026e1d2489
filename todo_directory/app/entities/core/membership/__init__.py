"""Membership edge module.

The User-Group relationship is stored as an explicit edge set rather than
as object references on either side. Each row of ``UserGroupLinkTable``
is one membership edge.
"""

from .table import UserGroupLinkTable

__all__ = ["UserGroupLinkTable"]
