"""SVCS - a minimal local version control system.

Tracks files, snapshots them into content-addressed commit folders,
and checks earlier snapshots back out.
"""

__version__ = "1.0.0"
