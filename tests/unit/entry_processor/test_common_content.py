"""Unit tests for entry_processor.common_content module."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from unittest.mock import Mock

from src.contentful_client.errors import APIUnreachableError
from src.entry_processor.common_content import CommonContentJoiner
from src.entry_processor.errors import CommonContentError, ValidationError
from src.entry_processor.models import PluginOptions
from tests.fixtures.sample_entries import make_collection, make_entry, make_file


def create_registry(results_by_content_type):
    """Mock registry whose client answers by the query's content_type."""
    client = Mock()

    def get_entries(query):
        result = results_by_content_type[query.get("content_type")]
        if isinstance(result, Exception):
            raise result
        return result

    client.get_entries.side_effect = get_entries
    registry = Mock()
    registry.get_client.return_value = client
    return registry


OPTIONS = PluginOptions(
    space_id="space1",
    access_token="token",
    common={
        "recent": {"content_type": "post", "limit": 3},
        "authors": {"content_type": "author"},
    },
)


class TestCommonContentJoiner:
    """Test cases for CommonContentJoiner."""

    def test_no_common_leaves_files_untouched(self):
        """Without common queries nothing is fetched or attached."""
        registry = Mock()
        files = {"a.html": make_file("a.html")}

        result = CommonContentJoiner(registry).attach_common(files, PluginOptions())

        assert result is files
        assert "common" not in files["a.html"]
        registry.get_client.assert_not_called()

    def test_every_label_attached_to_every_file(self):
        """N queries give N labels on every record, sharing one mapping."""
        posts = make_collection([make_entry("p1"), make_entry("p2")])
        authors = make_collection([make_entry("a1", "author")])
        registry = create_registry({"post": posts, "author": authors})
        files = {
            "index.html": make_file("index.html"),
            "post-p1.html": make_file("post-p1.html"),
        }

        CommonContentJoiner(registry).attach_common(files, OPTIONS)

        common = files["index.html"]["common"]
        assert set(common) == {"recent", "authors"}
        assert common["recent"] is posts
        assert common["authors"] is authors
        assert files["post-p1.html"]["common"] is common

    def test_queries_use_global_credentials(self):
        """Common queries run on the client of the global space."""
        registry = create_registry({"post": make_collection([]), "author": make_collection([])})

        CommonContentJoiner(registry).fetch_common(OPTIONS)

        registry.get_client.assert_called_once_with("token", "space1", None)

    def test_queries_built_from_blocks(self):
        """Each block is translated with the query builder."""
        registry = create_registry({"post": make_collection([]), "author": make_collection([])})

        CommonContentJoiner(registry).fetch_common(OPTIONS)

        queries = [c.args[0] for c in registry.get_client.return_value.get_entries.call_args_list]
        assert {"content_type": "post", "limit": 3} in queries
        assert {"content_type": "author"} in queries

    def test_failure_raises_and_attaches_nothing(self):
        """A failing query aborts the join with CommonContentError."""
        original = APIUnreachableError("cdn.contentful.com")
        registry = create_registry({"post": make_collection([]), "author": original})
        files = {"index.html": make_file("index.html")}

        with pytest.raises(CommonContentError) as exc_info:
            CommonContentJoiner(registry).attach_common(files, OPTIONS)

        assert exc_info.value.label == "authors"
        assert exc_info.value.__cause__ is original
        assert "common" not in files["index.html"]

    def test_first_failure_in_label_order_reported(self):
        """When several queries fail the first label is reported."""
        registry = create_registry({
            "post": APIUnreachableError("one"),
            "author": APIUnreachableError("two"),
        })

        with pytest.raises(CommonContentError) as exc_info:
            CommonContentJoiner(registry).fetch_common(OPTIONS)

        assert exc_info.value.label == "recent"

    def test_pool_sized_by_options(self, mocker):
        """The query pool follows options.max_workers."""
        executor = mocker.patch(
            'src.entry_processor.common_content.ThreadPoolExecutor', wraps=ThreadPoolExecutor
        )
        registry = create_registry({"post": make_collection([]), "author": make_collection([])})
        options = PluginOptions(
            space_id="space1", access_token="token", common=OPTIONS.common, max_workers=1
        )

        CommonContentJoiner(registry).fetch_common(options)

        executor.assert_called_once_with(max_workers=1)

    def test_explicit_pool_size_wins(self, mocker):
        """A joiner built with max_workers ignores the options value."""
        executor = mocker.patch(
            'src.entry_processor.common_content.ThreadPoolExecutor', wraps=ThreadPoolExecutor
        )
        registry = create_registry({"post": make_collection([]), "author": make_collection([])})

        CommonContentJoiner(registry, max_workers=1).fetch_common(OPTIONS)

        executor.assert_called_once_with(max_workers=1)

    def test_malformed_block_rejected_before_querying(self):
        """A bad common block raises ValidationError and fetches nothing."""
        registry = Mock()
        options = PluginOptions(
            space_id="space1", access_token="token", common={"x": {"filter": [1]}}
        )

        with pytest.raises(ValidationError) as exc_info:
            CommonContentJoiner(registry).fetch_common(options)

        assert exc_info.value.config_field == "common.x.filter"
        registry.get_client.assert_not_called()
