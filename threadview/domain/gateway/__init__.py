"""Gateway interfaces for the comment tree client.

Gateway interfaces are defined in the domain layer (dependency inversion).
Implementations live in the adapter layer.
"""

from threadview.domain.gateway.comment import PAGE_SIZE, SORT_ORDER, CommentGateway

__all__ = [
    "CommentGateway",
    "PAGE_SIZE",
    "SORT_ORDER",
]
