from pathlib import Path

import pytest

from repofixtures.workspace.builder import FixtureRepositoryBuilder
from repofixtures.workspace.git_ops import FixtureSetupError, run_git


class TestUpstreamTopology:
    def test_creates_three_distinct_repositories(
        self, upstream_builder: FixtureRepositoryBuilder, tmp_path: Path
    ) -> None:
        layout = upstream_builder.layout
        assert layout.remote == tmp_path / "remote"
        assert layout.upstream_remote == tmp_path / "upstream-remote"
        assert layout.upstream_local == tmp_path / "upstream-local"
        for path in (layout.remote, layout.upstream_remote, layout.upstream_local):
            assert path.is_dir()
        assert sorted(role.name for role in upstream_builder.roles) == [
            "remote",
            "upstream-local",
            "upstream-remote",
        ]

    def test_upstream_remote_is_bare_clone_of_remote(
        self, upstream_builder: FixtureRepositoryBuilder
    ) -> None:
        layout = upstream_builder.layout
        assert upstream_builder.is_bare_repository(layout.upstream_remote)
        assert upstream_builder.role("upstream-remote").bare
        assert upstream_builder.remote_url(layout.upstream_remote, "origin") == str(layout.remote)

    def test_upstream_local_has_main_checked_out(
        self, upstream_builder: FixtureRepositoryBuilder
    ) -> None:
        layout = upstream_builder.layout
        assert not upstream_builder.is_bare_repository(layout.upstream_local)
        assert upstream_builder.current_branch(layout.upstream_local) == "main"
        assert (layout.upstream_local / "README.md").exists()
        assert upstream_builder.remote_url(layout.upstream_local, "origin") == str(
            layout.upstream_remote
        )

    def test_remote_gets_upstream_link(self, upstream_builder: FixtureRepositoryBuilder) -> None:
        layout = upstream_builder.layout
        assert upstream_builder.remote_names(layout.remote) == ["upstream"]
        assert upstream_builder.remote_url(layout.remote, "upstream") == str(layout.upstream_remote)

    def test_history_is_shared(self, upstream_builder: FixtureRepositoryBuilder) -> None:
        layout = upstream_builder.layout
        assert run_git("rev-parse", "HEAD", cwd=layout.remote) == run_git(
            "rev-parse", "HEAD", cwd=layout.upstream_local
        )

    def test_running_twice_fails(self, upstream_builder: FixtureRepositoryBuilder) -> None:
        with pytest.raises(FixtureSetupError, match="already exists"):
            upstream_builder.setup_upstream()

    def test_without_remote_repository_fails(self, tmp_path: Path) -> None:
        builder = FixtureRepositoryBuilder(tmp_path)
        with pytest.raises(FixtureSetupError):
            builder.setup_upstream()
        assert not builder.layout.upstream_remote.exists()


class TestUpstreamOnDeveloperClone:
    def test_links_working_repository(self, fixture_builder: FixtureRepositoryBuilder) -> None:
        local = fixture_builder.create_local_repository()
        fixture_builder.setup_upstream()

        layout = fixture_builder.layout
        assert sorted(fixture_builder.remote_names(local.path)) == ["origin", "upstream"]
        assert fixture_builder.remote_url(local.path, "upstream") == str(layout.upstream_remote)
        assert fixture_builder.remote_names(layout.remote) == []

    def test_explicit_repository(self, fixture_builder: FixtureRepositoryBuilder) -> None:
        local = fixture_builder.create_local_repository()
        fixture_builder.setup_upstream(repository=fixture_builder.layout.remote)
        assert fixture_builder.remote_names(local.path) == ["origin"]
        assert fixture_builder.has_remote(fixture_builder.layout.remote, "upstream")
