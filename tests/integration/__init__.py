"""Integration tests for contentful-build.

These tests run the build end to end over a temporary source tree: config
loading, frontmatter parsing, the Contentful plugin and output writing. The
Contentful client is replaced by a mock registry, so no network access or
credentials are needed.
"""
