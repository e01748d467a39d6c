"""Exceptions raised by revyu collaborators.

Parse problems are never errors: the extractor degrades to fewer items and
the view falls back to plain rendering. Only the outer collaborators (git and
the completion API) raise, and the CLI turns these into click exceptions.
"""

from __future__ import annotations


class RevyuError(Exception):
    """Base class for all revyu failures."""


class ReviewError(RevyuError):
    """The completion API call failed or returned nothing usable."""


class GitDiffError(RevyuError):
    """``git diff`` could not be run or exited with an error."""
