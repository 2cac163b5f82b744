"""Custom exceptions for viralscore.

The scoring engine itself never raises; these cover caller-side misuse of the
collaborators built around it.
"""


class ViralScoreError(Exception):
    """Base exception for all viralscore errors."""

    def __init__(self, message: str, *args: object) -> None:
        self.message = message
        super().__init__(message, *args)


# Review gate errors
class ReviewError(ViralScoreError):
    """Base error for the review gate."""


class EmptyPostError(ReviewError):
    """Review requested for a post with no text."""


class PostBlockedError(ReviewError):
    """Tried to post anyway after the gate blocked a low-scoring post."""
