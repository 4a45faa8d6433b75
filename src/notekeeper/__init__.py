"""
NoteKeeper - multi-user notes with owner-managed collaboration.

Users register, log in with JWT access/refresh tokens, and share notes
with collaborators who may read and edit but never delete or re-share.
"""

__version__ = "1.0.0"
