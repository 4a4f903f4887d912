"""Unit tests for entry_processor.naming module."""

import pytest

from src.entry_processor.models import FileConfig, PluginOptions
from src.entry_processor.naming import FilenameBuilder
from tests.fixtures.sample_entries import make_entry


class TestSlugify:
    """Test cases for FilenameBuilder.slugify."""

    @pytest.mark.parametrize("value,expected", [
        ("Hello World", "hello-world"),
        ("Q&A: Part 2", "q-a-part-2"),
        ("  --Trim me--  ", "trim-me"),
        ("snake_case-kept", "snake_case-kept"),
        ("2x4K9", "2x4k9"),
    ])
    def test_slugify(self, value, expected):
        """Slugs are lower case with runs of unsafe characters collapsed."""
        assert FilenameBuilder.slugify(value) == expected


class TestFileNameFor:
    """Test cases for FilenameBuilder.file_name_for."""

    def test_default_pattern(self):
        """The default name is <content type>-<entry id>.html."""
        entry = make_entry("2x4K9", "blogPost")

        name = FilenameBuilder.file_name_for(entry, FileConfig(), PluginOptions())

        assert name == "blogpost-2x4k9.html"

    def test_file_pattern_overrides_global_pattern(self):
        """The file's pattern wins over the global one."""
        entry = make_entry("1", fields={"slug": "Hello World"})
        options = PluginOptions(entry_filename_pattern=":sys.id")

        name = FilenameBuilder.file_name_for(
            entry, FileConfig(entry_filename_pattern="posts/:fields.slug"), options
        )

        assert name == "posts/hello-world.html"

    def test_global_pattern_used_without_file_pattern(self):
        """The global pattern applies when the file has none."""
        entry = make_entry("abc")

        name = FilenameBuilder.file_name_for(
            entry, FileConfig(), PluginOptions(entry_filename_pattern="entry-:sys.id")
        )

        assert name == "entry-abc.html"

    def test_missing_placeholder_resolves_empty(self):
        """Placeholders that do not resolve become empty strings."""
        entry = make_entry("abc")

        name = FilenameBuilder.file_name_for(
            entry, FileConfig(entry_filename_pattern=":fields.missing-:sys.id"), PluginOptions()
        )

        assert name == "-abc.html"

    def test_permalink_style(self):
        """permalink_style names files <name>/index.<ext>."""
        entry = make_entry("1", fields={"slug": "first-post"})

        name = FilenameBuilder.file_name_for(
            entry,
            FileConfig(entry_filename_pattern=":fields.slug"),
            PluginOptions(permalink_style=True),
        )

        assert name == "first-post/index.html"

    def test_template_extension(self):
        """use_template_extension takes the extension from entry_template."""
        entry = make_entry("1")

        name = FilenameBuilder.file_name_for(
            entry,
            FileConfig(entry_template="post.njk"),
            PluginOptions(use_template_extension=True),
        )

        assert name == "post-1.njk"

    def test_template_extension_ignored_when_disabled(self):
        """The template's extension is not used unless enabled."""
        entry = make_entry("1")

        name = FilenameBuilder.file_name_for(entry, FileConfig(entry_template="post.njk"), PluginOptions())

        assert name == "post-1.html"

    def test_entry_key_appends_extension(self):
        """In entry-key mode the key value names the file."""
        entry = make_entry("1", "page", {"path": "/about/team/"})

        name = FilenameBuilder.file_name_for(entry, FileConfig(), PluginOptions(entry_key="path"))

        assert name == "about/team.html"

    def test_entry_key_keeps_existing_extension(self):
        """Key values that carry an extension are used verbatim."""
        entry = make_entry("1", "page", {"path": "feed.xml"})

        name = FilenameBuilder.file_name_for(entry, FileConfig(), PluginOptions(entry_key="path"))

        assert name == "feed.xml"
