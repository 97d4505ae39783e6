import pytest

from relplz.repo_url import RepoUrl

GITHUB_REPO_URL = "https://github.com/MarcoIeni/release-plz"


def test_gh_release_link_works_for_first_release():
    repo = RepoUrl.parse(GITHUB_REPO_URL)
    tag = "v0.0.1"
    assert repo.git_release_link(tag, tag) == f"{GITHUB_REPO_URL}/releases/tag/{tag}"


def test_gh_release_link_for_crates_already_published():
    repo = RepoUrl.parse(GITHUB_REPO_URL)
    previous_tag = "v0.1.0"
    next_tag = "v0.5.0"
    expected = f"{GITHUB_REPO_URL}/compare/{previous_tag}...{next_tag}"
    assert repo.git_release_link(previous_tag, next_tag) == expected


def test_gitlab_api_url():
    git_repo = RepoUrl.parse("git@host.example.com:ab/cd/myproj.git")
    assert (
        git_repo.gitlab_api_url()
        == "https://host.example.com/api/v4/projects/ab%2Fcd%2Fmyproj"
    )
    http_repo = RepoUrl.parse("https://host.example.com/ab/cd/myproj.git")
    assert (
        http_repo.gitlab_api_url()
        == "https://host.example.com/api/v4/projects/ab%2Fcd%2Fmyproj"
    )


def test_github_parts():
    repo = RepoUrl.parse(GITHUB_REPO_URL)
    assert repo.owner == "MarcoIeni"
    assert repo.name == "release-plz"
    assert repo.host == "github.com"
    assert repo.full_host() == GITHUB_REPO_URL


def test_git_suffix_is_stripped_from_name():
    repo = RepoUrl.parse("https://github.com/MarcoIeni/release-plz.git")
    assert repo.name == "release-plz"
    assert repo.full_host() == GITHUB_REPO_URL


def test_pr_link_on_github_and_elsewhere():
    assert RepoUrl.parse(GITHUB_REPO_URL).git_pr_link() == f"{GITHUB_REPO_URL}/pull"
    gitea = RepoUrl.parse("https://gitea.example.com/owner/repo")
    assert gitea.git_pr_link() == "https://gitea.example.com/owner/repo/pulls"
    assert not gitea.is_on_github()


def test_gitea_api_url_with_and_without_port():
    with_port = RepoUrl.parse("https://gitea.example.com:3000/owner/repo")
    assert with_port.gitea_api_url() == "https://gitea.example.com:3000/api/v1/"
    without_port = RepoUrl.parse("http://gitea.example.com/owner/repo")
    assert without_port.gitea_api_url() == "http://gitea.example.com/api/v1/"


def test_gitlab_api_url_keeps_port():
    repo = RepoUrl.parse("https://host.example.com:8443/ab/myproj")
    assert repo.gitlab_api_url() == "https://host.example.com:8443/api/v4/projects/ab%2Fmyproj"


@pytest.mark.parametrize(
    "url",
    ["https://github.com/release-plz", "/tmp/repo", "https://github.com/"],
)
def test_invalid_urls_are_rejected(url):
    with pytest.raises(ValueError):
        RepoUrl.parse(url)