"""The pull request that proposes a release."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from relplz.package import Package

log = logging.getLogger(__name__)

DEFAULT_BRANCH_PREFIX = "release-plz-"
OLD_BRANCH_PREFIX = "release-plz/"

# The largest body the hosting API accepts when creating a pull request.
MAX_BODY_LEN = 65536

_HEADER = "## 🤖 New release"
_FOOTER = "---\nThis PR was generated with release-plz."


@dataclass
class PullRequest:
    """Contents of a release pull request."""

    base_branch: str
    branch: str
    title: str
    body: str
    draft: bool = False
    labels: list[str] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        default_branch: str,
        updates: Sequence[tuple[Package, str]],
        summary: str,
        changes: str,
        project_contains_multiple_pub_packages: bool,
        branch_prefix: str = DEFAULT_BRANCH_PREFIX,
    ) -> PullRequest:
        """Build the pull request for `updates`, pairs of package and next version."""
        return cls(
            base_branch=default_branch,
            branch=release_branch(branch_prefix),
            title=pr_title(updates, project_contains_multiple_pub_packages),
            body=pr_body(summary, changes),
        )

    def mark_as_draft(self, draft: bool) -> PullRequest:
        """Return a copy with the draft flag set."""
        return replace(self, draft=draft)

    def with_labels(self, labels: Sequence[str]) -> PullRequest:
        """Return a copy carrying `labels`."""
        return replace(self, labels=list(labels))


def release_branch(prefix: str, now: datetime | None = None) -> str:
    """Name of a release branch: the prefix and the UTC time, without colons."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    # ':' is not valid in a branch name.
    stamp = now.strftime("%Y-%m-%dT%H:%M:%SZ").replace(":", "-")
    return f"{prefix}{stamp}"


def pr_title(
    updates: Sequence[tuple[Package, str]], project_contains_multiple_pub_packages: bool
) -> str:
    """Title of the pull request that releases `updates`."""
    if not updates:
        raise ValueError("no packages to update")
    first_package, first_version = updates[0]
    if len(updates) == 1 and project_contains_multiple_pub_packages:
        return f"chore({first_package.name}): release v{first_version}"
    if len(updates) > 1 and any(version != first_version for _, version in updates):
        return "chore: release"
    return f"chore: release v{first_version}"


def pr_body(summary: str, changes: str) -> str:
    """Body of the pull request, kept within MAX_BODY_LEN characters."""
    details = (
        "<details><summary><i><b>Changelog</b></i></summary><p>\n\n"
        f"{changes}\n</p></details>\n"
    )
    body = f"{_HEADER}{summary}\n{details}\n{_FOOTER}"
    if len(body) <= MAX_BODY_LEN:
        return body

    log.info("PR body is longer than %d characters. Omitting full changelog.", MAX_BODY_LEN)
    body = f"{_HEADER}{summary}\n{_FOOTER}"
    if len(body) > MAX_BODY_LEN:
        log.warning(
            "PR body is still longer than %d characters. Truncating as is.", MAX_BODY_LEN
        )
        body = body[:MAX_BODY_LEN]
    return body