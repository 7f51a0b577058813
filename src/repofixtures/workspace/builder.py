from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import Sequence

from repofixtures.config import hosting
from repofixtures.config.hosting import HostingDomain
from repofixtures.config.settings import FixtureConfig
from repofixtures.models.repository import FixtureLayout, Protocol, RemoteLink, RepositoryRole
from repofixtures.workspace import git_ops
from repofixtures.workspace.git_ops import FixtureSetupError

logger = logging.getLogger(__name__)


class FixtureRepositoryBuilder:
    """Builds a small topology of linked git repositories under one scenario root.

    Every git invocation receives its working directory explicitly, so the
    process-wide current directory is never touched. The builder owns all
    repositories it creates; nothing is shared between builders.
    """

    def __init__(self, root: Path, config: FixtureConfig | None = None) -> None:
        self.config = config or FixtureConfig()
        self.layout = FixtureLayout.under(Path(root).absolute(), self.config.layout)
        self.working_repository = self.layout.remote
        self._roles: dict[str, RepositoryRole] = {}
        self._links: list[RemoteLink] = []

    @property
    def roles(self) -> list[RepositoryRole]:
        return list(self._roles.values())

    @property
    def links(self) -> list[RemoteLink]:
        return list(self._links)

    def role(self, name: str) -> RepositoryRole:
        try:
            return self._roles[name]
        except KeyError:
            raise FixtureSetupError(f"no repository registered as '{name}'") from None

    def register_role(self, name: str, path: Path, *, bare: bool = False) -> RepositoryRole:
        path = Path(path).absolute()
        self._check_role_available(name, path)
        role = RepositoryRole(name=name, path=path, bare=bare)
        self._roles[name] = role
        return role

    # ------------------------------------------------------------------
    # Repository creation

    def init_remote_repository(self) -> RepositoryRole:
        """Create the base ``remote`` repository with one commit on the main branch."""
        path = self.layout.remote
        if path.exists():
            raise FixtureSetupError(f"destination already exists: {path}")
        self._check_role_available("remote", path)
        path.mkdir(parents=True)

        author = self.config.author
        git_ops.init(branch=self.config.main_branch, cwd=path)
        git_ops.set_identity(author.name, author.email, cwd=path)
        (path / "README.md").write_text(f"# {self.config.identity.name}\n")
        git_ops.add(["README.md"], cwd=path)
        git_ops.commit("Initial commit", cwd=path)
        logger.info("Initialized remote repository at %s", path)
        return self.register_role("remote", path)

    def create_local_repository(self) -> RepositoryRole:
        """Clone ``remote`` into the developer slot and make it the working repository."""
        role = self.clone_repository(self.layout.remote, self.layout.local, role="local")
        author = self.config.author
        git_ops.set_identity(author.name, author.email, cwd=role.path)
        self.working_repository = role.path
        return role

    def clone_repository(
        self,
        source: Path,
        destination: Path,
        *,
        bare: bool = False,
        role: str | None = None,
    ) -> RepositoryRole:
        source = Path(source).absolute()
        destination = Path(destination).absolute()
        if not source.exists():
            raise FixtureSetupError(f"clone source does not exist: {source}")
        if destination.exists():
            raise FixtureSetupError(f"destination already exists: {destination}")
        role = role or destination.name
        self._check_role_available(role, destination)
        destination.parent.mkdir(parents=True, exist_ok=True)

        git_ops.clone(str(source), destination, bare=bare)
        logger.info("Cloned %s into %s%s", source, destination, " (bare)" if bare else "")
        registered = self.register_role(role, destination, bare=bare)
        self._record_link(destination, "origin", str(source))
        return registered

    # ------------------------------------------------------------------
    # Commands and remotes

    def run_in_repository(self, path: Path, command: Sequence[str] | str) -> str:
        if isinstance(command, str):
            command = shlex.split(command)
        if not command:
            raise FixtureSetupError("no command given")
        return git_ops.run_command(list(command), cwd=Path(path))

    def add_remote(self, path: Path, name: str, url: str) -> RemoteLink:
        git_ops.remote_add(name, url, cwd=Path(path))
        logger.info("Added remote %s -> %s in %s", name, url, path)
        return self._record_link(Path(path), name, url)

    def set_remote_url(self, path: Path, name: str, url: str) -> RemoteLink:
        git_ops.remote_set_url(name, url, cwd=Path(path))
        logger.info("Set remote %s -> %s in %s", name, url, path)
        return self._record_link(Path(path), name, url)

    def build_url_for(self, domain: HostingDomain | str, protocol: Protocol | str) -> str:
        return hosting.build_url(domain, protocol, self.config)

    # ------------------------------------------------------------------
    # Composed scenarios

    def setup_upstream(self, repository: Path | None = None) -> None:
        """Clone ``remote`` into a bare upstream plus a working copy and link it.

        The working repository (or ``repository``) gets a remote named
        ``upstream`` pointing at the bare upstream repository.
        """
        layout = self.layout
        self.clone_repository(
            layout.remote, layout.upstream_remote, bare=True, role="upstream-remote"
        )
        self.clone_repository(layout.upstream_remote, layout.upstream_local, role="upstream-local")
        self.run_in_repository(layout.upstream_local, ["git", "checkout", self.config.main_branch])
        self.add_remote(repository or self.working_repository, "upstream", str(layout.upstream_remote))

    def set_origin_host(
        self,
        domain: HostingDomain | str,
        protocol: Protocol | str,
        repository: Path | None = None,
    ) -> RemoteLink:
        url = self.build_url_for(domain, protocol)
        return self.set_remote_url(repository or self.working_repository, "origin", url)

    # ------------------------------------------------------------------
    # Inspection

    def remote_url(self, path: Path, name: str) -> str:
        return git_ops.remote_get_url(name, cwd=Path(path))

    def remote_names(self, path: Path) -> list[str]:
        return git_ops.remote_names(cwd=Path(path))

    def has_remote(self, path: Path, name: str) -> bool:
        return git_ops.has_remote(name, cwd=Path(path))

    def current_branch(self, path: Path) -> str:
        return git_ops.current_branch(cwd=Path(path))

    def is_bare_repository(self, path: Path) -> bool:
        return git_ops.is_bare_repository(Path(path))

    def _check_role_available(self, name: str, path: Path) -> None:
        if not path.is_relative_to(self.layout.root):
            raise FixtureSetupError(
                f"path {path} lies outside the scenario root {self.layout.root}"
            )
        if name in self._roles:
            raise FixtureSetupError(f"repository role '{name}' is already registered")
        for existing in self._roles.values():
            if existing.path == path:
                raise FixtureSetupError(
                    f"path {path} is already used by repository role '{existing.name}'"
                )

    def _record_link(self, repository: Path, name: str, url: str) -> RemoteLink:
        repository = repository.absolute()
        link = RemoteLink(
            repository=repository,
            remote_name=name,
            url=url,
            protocol=hosting.detect_protocol(url),
        )
        self._links = [
            existing
            for existing in self._links
            if not (existing.repository == repository and existing.remote_name == name)
        ]
        self._links.append(link)
        return link
