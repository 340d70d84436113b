"""Domain value objects for the comment tree client."""

from enum import Enum

from pydantic import Field, field_validator

from threadview.domain.value.common import ValueObject
from threadview.domain.value.identifiers import CommentId


class ViewKind(str, Enum):
    """Which of the two mutually exclusive views the store holds."""

    ROOT_PAGE = "root_page"
    SUBTREE = "subtree"


class ViewState(ValueObject):
    """Navigation state of one comment tree widget.

    Replaced wholesale on every change; never mutated in place.

    - current_parent_id: set while a subtree is displayed, None on a root page
    - search_query: filter for root pages ("" means no filter)
    - reply_target_id: parent for the next created comment (None creates a root)
    - page: active root page
    """

    current_parent_id: CommentId | None = None
    search_query: str = ""
    reply_target_id: CommentId | None = None
    page: int = Field(default=1, ge=1)

    @field_validator("search_query")
    @classmethod
    def strip_query(cls, v: str) -> str:
        """Search only ever uses the trimmed query."""
        return v.strip()

    @property
    def viewing_subtree(self) -> bool:
        """Whether the widget currently shows a subtree."""
        return self.current_parent_id is not None
