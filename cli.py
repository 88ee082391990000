import asyncio
from typing import Awaitable, Callable, TypeVar

import typer
import uvicorn

from src.core.config import settings
from src.core.database import Database
from src.core.log_config import configure_logging
from src.apps.blog.dependencies import get_author_service, get_post_service

app = typer.Typer(help="CLI for the blog CMS backend.")

T = TypeVar("T")


# ---------------------------
# Helpers
# ---------------------------
def run_with_database(action: Callable[[Database], Awaitable[T]]) -> T:
    """Run an async action against the configured database, then dispose it."""

    async def runner() -> T:
        database = Database.from_settings()
        try:
            return await action(database)
        finally:
            await database.disconnect()

    configure_logging(settings.LOG_LEVEL)
    return asyncio.run(runner())


# ---------------------------
# Commands
# ---------------------------
@app.command()
def init_db():
    """Create the authors and posts tables."""
    run_with_database(lambda database: database.create_tables())
    print(f"✅ Tables created at {settings.ASYNC_DATABASE_URL}")


@app.command()
def drop_db(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt")
):
    """Drop the authors and posts tables."""
    if not yes:
        typer.confirm("Drop all tables and their data?", abort=True)
    run_with_database(lambda database: database.drop_tables())
    print("🗑️  Tables dropped")


@app.command()
def list_authors():
    """Print every author."""
    authors = run_with_database(lambda database: get_author_service(database).list())

    if not authors:
        print("📁 No authors found.")
        return

    for author in authors:
        print(f"  {author.id:>4}  {author.name}  ({author.created_at:%Y-%m-%d %H:%M})")


@app.command()
def list_posts():
    """Print every post with its author."""
    posts = run_with_database(lambda database: get_post_service(database).list())

    if not posts:
        print("📁 No posts found.")
        return

    for post in posts:
        print(f"  {post.id:>4}  {post.title}  by {post.author.name}")


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
    reload: bool = typer.Option(False, help="Enable auto-reload"),
):
    """Run the API server."""
    uvicorn.run("src.main:app", host=host, port=port, reload=reload, log_level="info")


# ---------------------------
# Entrypoint
# ---------------------------
if __name__ == "__main__":
    app()
