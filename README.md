# relplz

Building blocks for releasing packages from a Cargo workspace.

relplz holds the pieces a workspace release is put together from. It compares a local
package with its published copy, both by manifest dependencies and by lockfile versions,
and orders packages so that each comes after the packages it depends on. It also renders
tag and release names from templates, builds repository links and writes the text of a
release pull request.

## Installation

```
pip install relplz
```

To run the test suite:

```
pip install "relplz[test]"
pytest
```

## Modules

- `relplz.package`: the `Package`, `Dependency`, `Target` and `DependencyKind` models.
  It also provides `manifest_dir`, which returns the directory of a manifest path.
  `Package.package_path()` and `Package.canonical_path()` return the package directory.
- `relplz.toml_compare`: `are_toml_dependencies_updated` returns True when a local
  dependency that is not a path dependency has no equal entry among the registry
  package's dependencies.
- `relplz.lock_compare`: `are_lock_dependencies_updated(local_lock, registry_package)`
  returns True when a package locked in the registry package's `Cargo.lock` has a different
  version in the local lockfile. It returns False when either lockfile is missing and raises
  `LockfileError` for a lockfile it cannot read.
- `relplz.release_order`: `release_order` returns packages in an order in which they can be
  published. It raises `CircularDependencyError` when it finds a cycle. Development
  dependencies are ignored unless a feature enables them (`dep/feature`).
- `relplz.repo_url`: `RepoUrl.parse` reads a git remote URL, in URL or `user@host:path`
  form. It gives the web address (`full_host`), release and compare links
  (`git_release_link`), the pull request link (`git_pr_link`), and the Gitea and GitLab API
  URLs (`gitea_api_url`, `gitlab_api_url`).
- `relplz.templates`: `render_template` renders Jinja templates that use the
  `{{ package }}` and `{{ version }}` variables. `release_body_from_template` also provides
  `{{ changelog }}` and `{{ remote }}`, and renders the changelog alone by default.
  Rendering errors are raised as `ValueError`.
- `relplz.semver_check`: `is_cargo_semver_checks_installed` and `run_semver_check`. The
  check runs `cargo-semver-checks` and returns a `SemverCheck` whose outcome is
  `SemverOutcome.COMPATIBLE` or `SemverOutcome.INCOMPATIBLE`; an incompatible outcome
  carries the tool's report. The check removes any `Cargo.lock` or `target` directory that
  the tool created.
- `relplz.package_compare`: `are_packages_equal` compares a local package with its
  registry copy. It uses `cargo package --list` and compares file contents.
  `get_cargo_package_files` returns the listed files and raises `CargoPackageError` when
  `cargo package` fails.
- `relplz.update_config`: `UpdateConfig`, `PackageUpdateConfig` and `PackagesConfig`.
  `PackagesConfig` holds default settings and per-package overrides, and its
  `get_release_metadata` returns the release templates of a package, or `None` for a
  package that is not released.
- `relplz.workspace`: helpers such as `is_publishable`, `is_library`,
  `should_check_semver`, `new_manifest_dir_path`, `paths_to_check` and
  `is_dependency_referred_to_package`, which resolves a `path` dependency.
- `relplz.project`: `Project.from_packages` keeps the packages that a release metadata
  builder marks as released. It raises `ProjectError` for unknown overrides or when no
  package is left. `git_tag` and `release_name` default to `v{{ version }}`, or to
  `{{ package }}-v{{ version }}` when the project has several released packages.
- `relplz.pr`: `PullRequest.create` builds the branch name, title and body of a release pull
  request. The body is kept within 65536 characters.

## Example

```python
from relplz.package import Dependency, Package
from relplz.release_order import release_order
from relplz.repo_url import RepoUrl

app = Package("app", dependencies=[Dependency("core")])
core = Package("core")
print([p.name for p in release_order([app, core])])
# ['core', 'app']

repo = RepoUrl.parse("https://git.example.com/owner/project")
print(repo.git_release_link("v0.1.0", "v0.2.0"))
# https://git.example.com/owner/project/compare/v0.1.0...v0.2.0
```

## What relplz does not do

relplz is a library and has no command-line program. It does not download packages from a
registry, walk the git history of a package, compute next versions from commit messages,
or write changelogs. `PullRequest.create` takes the summary and changelog text ready-made,
and it does not open the pull request on any host.