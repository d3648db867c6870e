"""FastAPI application for the blog site."""

import logging
import pathlib

import fastapi
import fastapi.responses
import fastapi.staticfiles
import uvicorn

import common.app
import common.settings

from . import blog, render

APP_DIR = pathlib.Path(__file__).resolve().parent

logger = logging.getLogger(__name__)

app = common.app.create_app(title='Blog')

app.mount(
    '/static',
    fastapi.staticfiles.StaticFiles(directory=APP_DIR / 'static'),
    name='static',
)


def handle_blog_request(path_suffix: str) -> fastapi.responses.HTMLResponse:
    """Serve the part of a /blog/ URL after the prefix.

    Loads the posts file fresh, then renders either the list view or the post
    whose slug equals ``path_suffix``. Raises a BlogError subclass on failure.
    """
    posts = blog.load_posts()
    if blog.is_list_request(path_suffix):
        html = render.render_list(posts)
    else:
        html = render.render_post(blog.find_post(posts, path_suffix))
    return fastapi.responses.HTMLResponse(html)


@app.get('/', response_class=fastapi.responses.PlainTextResponse)
def index() -> str:
    """Placeholder for the site root."""
    return 'Hello, World!'


@app.get('/blog', response_class=fastapi.responses.HTMLResponse)
def blog_index() -> fastapi.responses.HTMLResponse:
    """Render the list of published posts."""
    return handle_blog_request('')


@app.get('/blog/{path_suffix:path}', response_class=fastapi.responses.HTMLResponse)
def blog_page(path_suffix: str) -> fastapi.responses.HTMLResponse:
    """Render the list for /blog/ or a single post for /blog/{slug}."""
    return handle_blog_request(path_suffix)


if __name__ == '__main__':
    logging.basicConfig(level=common.settings.LOG_LEVEL.upper())
    logger.info('Server starting on port %d...', common.settings.PORT)
    uvicorn.run(app, host=common.settings.HOST, port=common.settings.PORT)
