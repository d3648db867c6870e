"""HTML rendering for the blog list and post pages."""

import pathlib

import jinja2

import common.templates

from . import blog, errors

APP_DIR = pathlib.Path(__file__).resolve().parent

INDEX_TEMPLATE_FILE = 'index.html.jinja2'
POST_TEMPLATE_FILE = 'post.html.jinja2'

templates = common.templates.make_templates(APP_DIR / 'templates')


def _render(name: str, **context: object) -> str:
    """Render a template to a complete string, or raise RenderError."""
    try:
        return templates.get_template(name).render(**context)
    except jinja2.TemplateError as e:
        raise errors.RenderError(f'Template {name} failed: {e}') from e


def render_list(posts: list[blog.Post]) -> str:
    """Render the index page with one card per published post."""
    return _render(INDEX_TEMPLATE_FILE, posts=blog.published(posts))


def render_post(post: blog.Post) -> str:
    """Render the page for a single published post."""
    return _render(POST_TEMPLATE_FILE, post=post)
