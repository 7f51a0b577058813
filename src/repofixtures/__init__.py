from repofixtures.config.hosting import HostingDomain, build_url
from repofixtures.config.settings import ConfigurationError, FixtureConfig, load_config
from repofixtures.models.repository import FixtureLayout, Protocol, RemoteLink, RepositoryRole
from repofixtures.workspace.builder import FixtureRepositoryBuilder
from repofixtures.workspace.git_ops import FixtureSetupError

__all__ = [
    "ConfigurationError",
    "FixtureConfig",
    "FixtureLayout",
    "FixtureRepositoryBuilder",
    "FixtureSetupError",
    "HostingDomain",
    "Protocol",
    "RemoteLink",
    "RepositoryRole",
    "build_url",
    "load_config",
]
