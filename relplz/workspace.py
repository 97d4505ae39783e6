"""Helpers that classify workspace packages and resolve their dependency paths."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from relplz.package import Package
from relplz.package_compare import local_readme_override
from relplz.semver_check import is_cargo_semver_checks_installed


def is_publishable(package: Package) -> bool:
    """Return True if the package can be published to at least one registry."""
    if package.publish is not None:
        # An empty list means `publish = false` or `publish = []`.
        return bool(package.publish)
    return not is_example_package(package)


def is_example_package(package: Package) -> bool:
    """Return True if every target of the package is an example."""
    return all(target.kind == ["example"] for target in package.targets)


def is_library(package: Package) -> bool:
    """Return True if the package has a library target."""
    return any("lib" in target.kind for target in package.targets)


def should_check_semver(package: Package, run_semver_check: bool) -> bool:
    """Return True if the API compatibility check should run for the package."""
    return run_semver_check and is_library(package) and is_cargo_semver_checks_installed()


def new_manifest_dir_path(
    old_project_root: str | Path,
    old_manifest_dir: str | Path,
    new_project_root: str | Path,
) -> Path:
    """Return where the manifest directory lands once the project root is copied.

    `new_project_root` is the directory that holds the copy of the project root.
    """
    old_project_root = Path(old_project_root)
    parent_root = old_project_root.parent
    try:
        relative = Path(old_manifest_dir).relative_to(parent_root)
    except ValueError as exc:
        raise ValueError(f"cannot strip prefix for manifest dir: {exc}") from exc
    return Path(new_project_root) / relative


def paths_to_check(package_path: str | Path, package: Package) -> list[Path]:
    """Paths whose history belongs to the package: its directory and its README."""
    paths = [Path(package_path)]
    readme = local_readme_override(package, package_path)
    if readme is not None:
        paths.append(readme)
    return paths


def is_workspace_dependency(dependency: Mapping[str, Any]) -> bool:
    """Return True if the entry has the form `dep.workspace = true`."""
    return (
        dependency.get("workspace") is True
        and "version" not in dependency
        and "path" not in dependency
    )


def canonicalized_path(dependency: Mapping[str, Any], package_dir: str | Path) -> Path | None:
    """Absolute path of a path dependency listed in the manifest in `package_dir`.

    Returns None if the entry has no string `path` or the path doesn't exist.
    """
    relpath = dependency.get("path")
    if not isinstance(relpath, str):
        return None
    try:
        return (Path(package_dir) / relpath).resolve(strict=True)
    except (OSError, RuntimeError):
        return None


def is_dependency_referred_to_package(
    dependency: Mapping[str, Any],
    package_dir: str | Path,
    dependency_package_dir: str | Path,
) -> bool:
    """Return True if the dependency listed in `package_dir` points at `dependency_package_dir`."""
    dep_path = canonicalized_path(dependency, package_dir)
    return dep_path is not None and dep_path == Path(dependency_package_dir)