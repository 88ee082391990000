"""Post router."""

from src.core.bases.base_router import BaseRouter
from src.apps.blog.dependencies import get_post_service
from src.apps.blog.schemas.post import PostCreate, PostRead, PostUpdate, PostWithAuthor


class PostRouter(BaseRouter):
    """Post router class."""

    def __init__(self):
        super().__init__(
            service_factory=get_post_service,
            read_schema=PostRead,
            detail_schema=PostWithAuthor,
            create_schema=PostCreate,
            update_schema=PostUpdate,
            entity_name="Post",
            prefix="/posts",
            tags=["Posts"]
        )


# Router instance
router = PostRouter().get_router()
