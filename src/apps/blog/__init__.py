"""Blog app."""

from .routers.author_router import router as author_router
from .routers.post_router import router as post_router
