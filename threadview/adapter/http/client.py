"""HTTP comment gateway.

Talks to the comment REST service:

    GET    /comments?page={p}&limit=10&sort=asc[&search={q}]
    GET    /comments?parent={id}
    POST   /comments            {"content": ..., "parent_id": ...}
    DELETE /comments/{id}
"""

from typing import Any, Callable, Optional, TypeVar

import httpx
import logfire
from pydantic import BaseModel, ValidationError

from threadview.adapter.error import ApiError, TransportError
from threadview.adapter.http.mappers import (
    payload_to_children,
    payload_to_comment,
    payload_to_page,
)
from threadview.adapter.http.schema import (
    CommentListPayload,
    CommentPayload,
    CreateCommentBody,
    DeletePayload,
)
from threadview.domain.gateway import PAGE_SIZE, SORT_ORDER, CommentGateway
from threadview.domain.model import Comment, CommentPage
from threadview.domain.value import CommentId

P = TypeVar("P", bound=BaseModel)
R = TypeVar("R")


class HttpCommentGateway(CommentGateway):
    """Comment gateway backed by an httpx client.

    The client is owned by the caller (the DI container closes it) and must
    already carry the service base URL.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize HTTP comment gateway.

        Args:
            client: httpx client configured with the comment service base URL
        """
        self.client = client

    async def list_root_page(self, page: int, search: str = "") -> CommentPage:
        """List one page of root comments."""
        params: dict[str, Any] = {"page": page, "limit": PAGE_SIZE, "sort": SORT_ORDER}
        if search:
            params["search"] = search

        with logfire.span(
            "comment_gateway.list_root_page", page=page, search=search or None
        ):
            response = await self._send("GET", "/comments", params=params)
            result = self._parse(
                response,
                CommentListPayload,
                lambda payload: payload_to_page(payload, requested_page=page),
            )
            logfire.info(
                "Root page listed",
                page=result.page,
                count=len(result.comments),
                total_pages=result.total_pages,
            )
            return result

    async def list_children(self, parent_id: CommentId) -> list[Comment]:
        """List the full reply subtree below a comment."""
        with logfire.span("comment_gateway.list_children", parent_id=parent_id):
            response = await self._send(
                "GET", "/comments", params={"parent": parent_id}
            )
            children = self._parse(response, CommentListPayload, payload_to_children)
            logfire.info("Replies listed", parent_id=parent_id, count=len(children))
            return children

    async def create(
        self, content: str, parent_id: Optional[CommentId] = None
    ) -> Comment:
        """Create a comment; parent_id is omitted from the body for roots."""
        body = CreateCommentBody(content=content, parent_id=parent_id)

        with logfire.span(
            "comment_gateway.create",
            parent_id=parent_id,
            content_length=len(content),
        ):
            response = await self._send(
                "POST", "/comments", json=body.model_dump(exclude_none=True)
            )
            comment = self._parse(response, CommentPayload, payload_to_comment)
            logfire.info("Comment created", comment_id=comment.id, parent_id=parent_id)
            return comment

    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment and, server-side, its descendants."""
        with logfire.span("comment_gateway.delete", comment_id=comment_id):
            response = await self._send("DELETE", f"/comments/{comment_id}")
            if not response.content:
                # 204 No Content: confirmed, count unknown
                logfire.info("Comment deleted", comment_id=comment_id)
                return 0
            deleted = self._parse(response, DeletePayload, lambda p: p.deleted)
            logfire.info("Comment deleted", comment_id=comment_id, deleted=deleted)
            return deleted

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> httpx.Response:
        """Send one request and reject anything outside 2xx.

        Raises:
            TransportError: If the service cannot be reached
            ApiError: If the status is not in 200-299
        """
        try:
            response = await self.client.request(method, path, params=params, json=json)
        except httpx.HTTPError as e:
            logfire.error(
                "Comment service unreachable", method=method, path=path, error=str(e)
            )
            raise TransportError(f"Comment service unreachable: {e}") from e

        if not response.is_success:
            logfire.error(
                "Comment service request failed",
                method=method,
                path=path,
                status_code=response.status_code,
                error=response.text,
            )
            raise ApiError(
                response.status_code, response.reason_phrase or "Request failed"
            )

        return response

    @staticmethod
    def _parse(
        response: httpx.Response, schema: type[P], convert: Callable[[P], R]
    ) -> R:
        """Parse a success body into domain objects.

        Raises:
            ApiError: If the body does not match the expected shape
        """
        try:
            return convert(schema.model_validate_json(response.content))
        except ValidationError as e:
            logfire.error(
                "Invalid comment service payload",
                status_code=response.status_code,
                error=str(e),
            )
            raise ApiError(response.status_code, "Invalid response payload") from e
