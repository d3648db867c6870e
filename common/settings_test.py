"""Unit tests for common/settings.py."""

import importlib
import os
import pathlib
import unittest

import common.settings


class TestSettings(unittest.TestCase):
    """Tests for shared application settings."""

    def _reload_with(self, name: str, value: str | None) -> None:
        """Reload settings with ``name`` set to ``value`` (or unset)."""
        backup = os.environ.pop(name, None)
        self.addCleanup(self._restore, name, backup)
        if value is not None:
            os.environ[name] = value
        importlib.reload(common.settings)

    def _restore(self, name: str, backup: str | None) -> None:
        os.environ.pop(name, None)
        if backup is not None:
            os.environ[name] = backup
        importlib.reload(common.settings)

    def test_posts_file_defaults_to_repo_data_dir(self) -> None:
        """BLOG_POSTS_FILE defaults to blog/data/blog-posts.json in the repo."""
        self._reload_with('BLOG_POSTS_FILE', None)
        expected = common.settings.REPO_DIR / 'blog' / 'data' / 'blog-posts.json'
        self.assertEqual(common.settings.BLOG_POSTS_FILE, expected)
        self.assertTrue(common.settings.BLOG_POSTS_FILE.is_file())

    def test_posts_file_reads_from_env(self) -> None:
        """BLOG_POSTS_FILE is read from the environment."""
        self._reload_with('BLOG_POSTS_FILE', '/srv/blog/posts.json')
        self.assertEqual(
            common.settings.BLOG_POSTS_FILE, pathlib.Path('/srv/blog/posts.json')
        )

    def test_port_defaults_to_8080(self) -> None:
        """PORT defaults to 8080."""
        self._reload_with('PORT', None)
        self.assertEqual(common.settings.PORT, 8080)

    def test_port_reads_from_env(self) -> None:
        """PORT is parsed as an int from the environment."""
        self._reload_with('PORT', '9000')
        self.assertEqual(common.settings.PORT, 9000)

    def test_site_title_reads_from_env(self) -> None:
        """SITE_TITLE is read from the environment."""
        self._reload_with('SITE_TITLE', 'Notes')
        self.assertEqual(common.settings.SITE_TITLE, 'Notes')


if __name__ == '__main__':
    unittest.main()
