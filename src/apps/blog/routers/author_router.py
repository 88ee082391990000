"""Author router."""

from src.core.bases.base_router import BaseRouter
from src.apps.blog.dependencies import get_author_service
from src.apps.blog.schemas.author import AuthorCreate, AuthorRead, AuthorUpdate


class AuthorRouter(BaseRouter):
    """Author router class."""

    def __init__(self):
        super().__init__(
            service_factory=get_author_service,
            read_schema=AuthorRead,
            create_schema=AuthorCreate,
            update_schema=AuthorUpdate,
            entity_name="Author",
            prefix="/authors",
            tags=["Authors"]
        )


# Router instance
router = AuthorRouter().get_router()
