from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Callable

from repofixtures.steps.remote_steps import my_remote_origin_is_on, my_repo_has_an_upstream_repo

if TYPE_CHECKING:
    from repofixtures.workspace.builder import FixtureRepositoryBuilder

StepHandler = Callable[..., Any]


class StepRegistry:
    """Maps step phrases to handlers; captured groups become handler arguments."""

    def __init__(self) -> None:
        self._steps: list[tuple[re.Pattern[str], StepHandler]] = []

    def register(self, pattern: str, handler: StepHandler) -> None:
        self._steps.append((re.compile(pattern), handler))

    def match(self, text: str) -> tuple[StepHandler, tuple[str, ...]] | None:
        for pattern, handler in self._steps:
            found = pattern.match(text)
            if found is not None:
                return handler, found.groups()
        return None

    def run(self, text: str, builder: FixtureRepositoryBuilder) -> Any:
        matched = self.match(text)
        if matched is None:
            raise LookupError(f"No step matches: {text!r}")
        handler, args = matched
        return handler(builder, *args)


def default_registry() -> StepRegistry:
    registry = StepRegistry()
    registry.register(r"^my repo has an upstream repo$", my_repo_has_an_upstream_repo)
    registry.register(
        r"^my remote origin is on (GitHub|Bitbucket) through (HTTPS|SSH)$",
        my_remote_origin_is_on,
    )
    return registry
