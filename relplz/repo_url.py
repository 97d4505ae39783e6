"""Parse the URL of a git repository and build links to its web pages and APIs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

# `[user@]host:path`, the short form understood by ssh.
_SCP_RE = re.compile(r"^(?:(?P<user>[^@/]+)@)?(?P<host>[^:/]+):(?P<path>.*)$")


@dataclass(frozen=True)
class RepoUrl:
    """The parts of a git repository URL."""

    scheme: str
    host: str
    port: int | None
    owner: str
    name: str
    path: str

    @classmethod
    def parse(cls, git_host_url: str) -> RepoUrl:
        """Parse a URL such as `https://host/owner/name` or `git@host:owner/name.git`."""
        url = git_host_url.strip()
        if "://" in url:
            try:
                parts = urlsplit(url)
                port = parts.port
            except ValueError as exc:
                raise ValueError(f"cannot parse git url {git_host_url}: {exc}") from exc
            scheme = parts.scheme
            host = parts.hostname or ""
            path = parts.path
        else:
            match = _SCP_RE.match(url)
            if match is None:
                raise ValueError(f"cannot find host in git url {git_host_url}")
            scheme = "ssh"
            host = match["host"]
            path = match["path"]
            port = None

        if not host:
            raise ValueError(f"cannot find host in git url {git_host_url}")
        segments = [s for s in path.split("/") if s]
        if not segments:
            raise ValueError(
                f"cannot parse git url {git_host_url}: missing repository name"
            )
        name = segments[-1].removesuffix(".git")
        if len(segments) < 2:
            raise ValueError(f"cannot find owner in git url {git_host_url}")
        owner = segments[-2]
        return cls(
            scheme=scheme,
            host=host,
            port=port,
            owner=owner,
            name=name,
            path=path.removesuffix(".git"),
        )

    def is_on_github(self) -> bool:
        """Return True if the repository is hosted on GitHub."""
        return "github" in self.host

    def full_host(self) -> str:
        """Web address of the repository."""
        return f"https://{self.host}/{self.owner}/{self.name}"

    def git_release_link(self, prev_tag: str, new_tag: str) -> str:
        """Link to the release page, or to the comparison with the previous tag."""
        host = self.full_host()
        if prev_tag == new_tag:
            return f"{host}/releases/tag/{new_tag}"
        return f"{host}/compare/{prev_tag}...{new_tag}"

    def git_pr_link(self) -> str:
        """Base link of the pull requests of the repository."""
        pull_path = "pull" if self.is_on_github() else "pulls"
        return f"{self.full_host()}/{pull_path}"

    def gitea_api_url(self) -> str:
        """Base URL of the Gitea API of the host."""
        v1 = "api/v1/"
        if self.port is not None:
            return f"{self.scheme}://{self.host}:{self.port}/{v1}"
        return f"{self.scheme}://{self.host}/{v1}"

    def gitlab_api_url(self) -> str:
        """URL of the project in the GitLab API."""
        v4 = "api/v4/projects"
        prj_path = self.path.removeprefix("/").replace("/", "%2F")
        scheme = "https" if self.scheme == "ssh" else self.scheme
        if self.port is not None:
            return f"{scheme}://{self.host}:{self.port}/{v4}/{prj_path}"
        return f"{scheme}://{self.host}/{v4}/{prj_path}"