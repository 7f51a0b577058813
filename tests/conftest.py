pytest_plugins = ["repofixtures.testing.conftest"]
