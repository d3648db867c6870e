"""Blog post loading and selection logic."""

import logging
import pathlib

import pydantic

import common.settings

from . import errors

logger = logging.getLogger(__name__)

# Suffixes of /blog/... that mean "show the list" rather than a slug.
LIST_SUFFIXES = ('', 'blog')


class Post(pydantic.BaseModel):
    """A single blog entry as stored in the posts file."""

    model_config = pydantic.ConfigDict(strict=True)

    id: int
    title: str
    slug: str
    date: str
    text: str
    is_published: bool


class BlogData(pydantic.BaseModel):
    """Top-level structure of the posts file."""

    posts: list[Post]


def load_posts(path: pathlib.Path | None = None) -> list[Post]:
    """Read and parse the posts file, in file order.

    The file is re-read on every call. Raises ReadError if it cannot be read and
    ParseError if its content does not match the schema; nothing is returned
    from a partially valid document.
    """
    path = path or common.settings.BLOG_POSTS_FILE
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise errors.ReadError(f'Cannot read {path}: {e}') from e

    try:
        data = BlogData.model_validate_json(raw)
    except pydantic.ValidationError as e:
        raise errors.ParseError(
            f'Invalid posts file {path}: {e.error_count()} error(s)'
        ) from e

    duplicates = find_duplicate_slugs(data.posts)
    if duplicates:
        logger.warning('Duplicate published slugs in %s: %s', path, duplicates)
    return data.posts


def find_duplicate_slugs(posts: list[Post]) -> list[str]:
    """Return slugs shared by more than one published post."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for post in published(posts):
        if post.slug in seen and post.slug not in duplicates:
            duplicates.append(post.slug)
        seen.add(post.slug)
    return duplicates


def published(posts: list[Post]) -> list[Post]:
    """Published posts in storage order."""
    return [p for p in posts if p.is_published]


def is_list_request(suffix: str) -> bool:
    """Whether the path after /blog/ selects the list view."""
    return suffix in LIST_SUFFIXES


def find_post(posts: list[Post], slug: str) -> Post:
    """Return the first published post with ``slug``.

    Raises NotFound when the slug is missing or only matches unpublished posts.
    """
    matched = next((p for p in posts if p.slug == slug and p.is_published), None)
    if matched is None:
        raise errors.NotFound(f'No published post with slug {slug!r}')
    return matched
