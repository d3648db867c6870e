"""Factory for creating Jinja2Templates with autoescaping and site globals."""

import pathlib

import fastapi.templating

import common.settings


def make_templates(
    directory: pathlib.Path | str,
) -> fastapi.templating.Jinja2Templates:
    """Create a Jinja2Templates instance with the site_title global pre-set.

    Autoescaping is always on: post titles, dates and bodies are untrusted text.
    """
    templates = fastapi.templating.Jinja2Templates(directory=str(directory))
    templates.env.autoescape = True
    templates.env.globals['site_title'] = common.settings.SITE_TITLE  # type: ignore[reportUnknownMemberType]
    return templates
