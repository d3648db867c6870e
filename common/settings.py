"""Shared application settings read from environment variables."""

import os
import pathlib

REPO_DIR = pathlib.Path(__file__).resolve().parent.parent

BLOG_POSTS_FILE: pathlib.Path = pathlib.Path(
    os.environ.get('BLOG_POSTS_FILE', REPO_DIR / 'blog' / 'data' / 'blog-posts.json')
)
SITE_TITLE: str = os.environ.get('SITE_TITLE', 'Blog Posts')
LOG_LEVEL: str = os.environ.get('LOG_LEVEL', 'INFO')
HOST: str = os.environ.get('HOST', '0.0.0.0')
PORT: int = int(os.environ.get('PORT', '8080'))
