"""Display fragments produced by the tree renderer.

Fragments describe what to show, not how: a display adapter turns them into
terminal text (or any other display primitive). Every action a fragment
carries is inert data that the view controller binds to a real handler.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from threadview.domain.value import CommentId

# Abstract indentation unit per nesting level
INDENT_UNIT = 20

REPLY_MARKER = "↳ "

NO_COMMENTS = "No comments."


class ActionKind(str, Enum):
    """User actions a fragment can trigger."""

    DELETE = "delete"
    REPLY = "reply"
    PAGE = "page"


@dataclass(frozen=True)
class Action:
    """Trigger embedded in a fragment.

    target is a comment id for DELETE/REPLY and a page number for PAGE.
    """

    kind: ActionKind
    target: int
    label: str


@dataclass(frozen=True)
class Placeholder:
    """Fixed empty-state text shown instead of an empty tree."""

    text: str = NO_COMMENTS


@dataclass(frozen=True)
class CommentBlock:
    """One rendered comment and its rendered replies."""

    comment_id: CommentId
    content: str
    created_at: datetime
    depth: int
    indent: int
    marker: str
    actions: tuple[Action, ...]
    children: "TreeFragment"


@dataclass(frozen=True)
class TreeFragment:
    """Ordered sibling blocks at one depth, or the empty-state placeholder."""

    blocks: tuple[CommentBlock, ...] = ()
    placeholder: Placeholder | None = None

    @property
    def is_empty(self) -> bool:
        return not self.blocks


@dataclass(frozen=True)
class PageSelector:
    """Buttons for root page navigation."""

    buttons: tuple[Action, ...]
    current: int


@dataclass(frozen=True)
class ViewFragment:
    """Everything written to the tree container in one render."""

    tree: TreeFragment
    pages: PageSelector | None = None
    heading: str | None = None
