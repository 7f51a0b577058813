"""
Pytest plugin exposing the repofixtures fixtures.

Add this to your conftest.py:

    pytest_plugins = ["repofixtures.testing.conftest"]
"""

from repofixtures.testing.fixtures import fixture_builder, fixture_config, upstream_builder

__all__ = ["fixture_builder", "fixture_config", "upstream_builder"]
