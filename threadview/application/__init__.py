"""Application layer: the comment tree controller and its display contract."""

from .controller import CommentTreeController
from .display import DisplaySurface

__all__ = ["CommentTreeController", "DisplaySurface"]
