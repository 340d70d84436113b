"""Strongly typed identifiers.

Comment ids are assigned by the comment service as positive integers.
"""

from typing import NewType

CommentId = NewType("CommentId", int)
