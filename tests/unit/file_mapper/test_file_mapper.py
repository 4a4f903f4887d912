"""Unit tests for file_mapper.file_mapper module."""

import pytest
import yaml

from src.file_mapper.errors import FilesystemError
from src.file_mapper.file_mapper import MAX_FILE_SIZE, FileMapper


class TestFileMapperRead:
    """Test cases for FileMapper.read."""

    def test_reads_tree_with_posix_keys(self, tmp_path):
        """Every file is keyed by its relative posix path."""
        (tmp_path / "blog").mkdir()
        (tmp_path / "index.html").write_bytes(b"<p>Home</p>")
        (tmp_path / "blog" / "posts.html").write_text(
            "---\ncontentful:\n  content_type: post\n---\nList", encoding="utf-8"
        )

        files = FileMapper().read(str(tmp_path))

        assert list(files) == ["blog/posts.html", "index.html"]
        assert files["index.html"] == {"contents": b"<p>Home</p>"}
        assert files["blog/posts.html"]["contentful"] == {"content_type": "post"}
        assert files["blog/posts.html"]["contents"] == b"List"

    def test_missing_directory_raises(self, tmp_path):
        """A missing source directory raises FilesystemError."""
        with pytest.raises(FilesystemError) as exc_info:
            FileMapper().read(str(tmp_path / "missing"))

        assert exc_info.value.operation == "read"
        assert "Source directory not found" in str(exc_info.value)

    def test_oversized_file_rejected(self, tmp_path, mocker):
        """Files above the size limit are rejected."""
        (tmp_path / "big.bin").write_bytes(b"0123456789")
        mocker.patch(
            "src.file_mapper.file_mapper.os.path.getsize",
            return_value=MAX_FILE_SIZE + 1
        )
        mapper = FileMapper()

        with pytest.raises(FilesystemError) as exc_info:
            mapper.read(str(tmp_path))

        assert "exceeds maximum allowed size" in str(exc_info.value)


class TestFileMapperWrite:
    """Test cases for FileMapper.write."""

    def test_writes_contents(self, tmp_path):
        """Records are written below the destination, creating directories."""
        files = {
            "index.html": {"contents": b"<p>Home</p>"},
            "blog/post-1.html": {"contents": "<p>Post</p>"},
            "empty.html": {},
        }
        dest = tmp_path / "build"

        written = FileMapper().write(files, str(dest))

        assert written == [dest / "index.html", dest / "blog/post-1.html", dest / "empty.html"]
        assert (dest / "index.html").read_bytes() == b"<p>Home</p>"
        assert (dest / "blog" / "post-1.html").read_text(encoding="utf-8") == "<p>Post</p>"
        assert (dest / "empty.html").read_bytes() == b""

    def test_path_traversal_rejected(self, tmp_path):
        """Names escaping the destination are rejected."""
        with pytest.raises(FilesystemError) as exc_info:
            FileMapper().write({"../escape.html": {"contents": b"x"}}, str(tmp_path / "build"))

        assert "Path traversal detected" in str(exc_info.value)
        assert not (tmp_path / "escape.html").exists()


class TestFileMapperManifest:
    """Test cases for FileMapper.write_manifest."""

    def test_lists_generated_records_only(self, tmp_path):
        """Only records with a parent appear in the manifest."""
        files = {
            "posts.html": {"contents": b""},
            "post-1.html": {
                "contents": b"",
                "id": "1",
                "content_type": "post",
                "layout": "post.html",
                "_parent_file_name": "posts.html",
            },
        }
        manifest = tmp_path / "out" / "manifest.yaml"

        FileMapper().write_manifest(files, str(manifest))

        data = yaml.safe_load(manifest.read_text(encoding="utf-8"))
        assert data == {
            "generated": [{
                "file": "post-1.html",
                "id": "1",
                "content_type": "post",
                "layout": "post.html",
                "parent": "posts.html",
            }]
        }

    def test_empty_manifest(self, tmp_path):
        """Without generated records the list is empty."""
        manifest = tmp_path / "manifest.yaml"

        FileMapper().write_manifest({"a.html": {"contents": b""}}, str(manifest))

        assert yaml.safe_load(manifest.read_text(encoding="utf-8")) == {"generated": []}
