"""Failures raised while serving blog requests."""

import common.app


class BlogError(common.app.AppError):
    """Base class for blog request failures."""


class ReadError(BlogError):
    """The posts file could not be read."""

    message = 'Error reading blog posts'


class ParseError(BlogError):
    """The posts file is not valid JSON or does not match the post schema."""

    message = 'Error parsing blog posts'


class NotFound(BlogError):
    """No published post has the requested slug.

    Raised the same way for unpublished posts so drafts are not revealed.
    """

    status_code = 404
    message = '404 page not found'


class RenderError(BlogError):
    """A template failed to render."""

    message = 'Error rendering template'
