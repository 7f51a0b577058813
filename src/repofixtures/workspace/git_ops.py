from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


class FixtureSetupError(Exception):
    def __init__(
        self,
        message: str,
        *,
        command: list[str] | None = None,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.command = command or []
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


def run_command(cmd: list[str], *, cwd: Path) -> str:
    cwd = Path(cwd)
    if not cwd.is_dir():
        raise FixtureSetupError(
            f"working directory does not exist: {cwd}", command=cmd
        )
    logger.debug("Running %s in %s", " ".join(cmd), cwd)
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise FixtureSetupError(f"executable not found: {cmd[0]}", command=cmd) from e
    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise FixtureSetupError(
            f"command failed ({result.returncode}): {' '.join(cmd)}\n{stderr}",
            command=cmd,
            returncode=result.returncode,
            stderr=stderr,
        )
    return result.stdout.strip()


def run_git(*args: str, cwd: Path) -> str:
    return run_command(["git", *args], cwd=cwd)


def init(*, branch: str, cwd: Path) -> None:
    run_git("init", cwd=cwd)
    # works on an unborn HEAD regardless of init.defaultBranch
    run_git("symbolic-ref", "HEAD", f"refs/heads/{branch}", cwd=cwd)


def set_identity(name: str, email: str, *, cwd: Path) -> None:
    run_git("config", "user.name", name, cwd=cwd)
    run_git("config", "user.email", email, cwd=cwd)


def add(paths: list[str], *, cwd: Path) -> None:
    if not paths:
        return
    run_git("add", "--", *paths, cwd=cwd)


def commit(message: str, *, cwd: Path) -> str:
    run_git("commit", "-m", message, cwd=cwd)
    return rev_parse("HEAD", cwd=cwd)


def clone(url: str, target: Path, *, bare: bool = False) -> None:
    target = Path(target).absolute()
    args = ["clone"]
    if bare:
        args.append("--bare")
    args.extend([url, str(target)])
    run_git(*args, cwd=target.parent)


def checkout(ref: str, *, cwd: Path) -> None:
    run_git("checkout", ref, cwd=cwd)


def rev_parse(ref: str, *, cwd: Path) -> str:
    return run_git("rev-parse", ref, cwd=cwd)


def current_branch(*, cwd: Path) -> str:
    return run_git("rev-parse", "--abbrev-ref", "HEAD", cwd=cwd)


def is_bare_repository(path: Path) -> bool:
    return run_git("rev-parse", "--is-bare-repository", cwd=path) == "true"


def remote_add(name: str, url: str, *, cwd: Path) -> None:
    run_git("remote", "add", name, url, cwd=cwd)


def remote_set_url(name: str, url: str, *, cwd: Path) -> None:
    run_git("remote", "set-url", name, url, cwd=cwd)


def remote_get_url(name: str, *, cwd: Path) -> str:
    return run_git("remote", "get-url", name, cwd=cwd)


def remote_names(*, cwd: Path) -> list[str]:
    output = run_git("remote", cwd=cwd)
    return output.splitlines() if output else []


def has_remote(name: str, *, cwd: Path) -> bool:
    return name in remote_names(cwd=cwd)
