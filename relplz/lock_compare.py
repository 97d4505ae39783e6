"""Detect whether the locked dependency versions of a package changed."""

from __future__ import annotations

import logging
import tomllib
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)


class LockfileError(Exception):
    """A lockfile could not be read or has an invalid format."""


@dataclass(frozen=True)
class LockedPackage:
    """A package entry of a lockfile."""

    name: str
    version: str


def are_lock_dependencies_updated(
    local_lock: str | Path, registry_package: str | Path
) -> bool:
    """Return True if a package locked by the registry package changed version locally.

    New packages added to the local lockfile are not detected, only version changes.
    Returns False if either lockfile is missing.
    """
    local_lock = Path(local_lock)
    registry_lock = Path(registry_package) / "Cargo.lock"
    if not local_lock.exists() or not registry_lock.exists():
        return False
    try:
        local_packages = read_lockfile(local_lock)
    except LockfileError as exc:
        raise LockfileError(
            f"failed to load lockfile of local package {str(local_lock)!r}: {exc}"
        ) from exc
    try:
        registry_packages = read_lockfile(registry_lock)
    except LockfileError as exc:
        raise LockfileError(
            f"failed to load lockfile of registry package {str(registry_lock)!r}: {exc}"
        ) from exc
    return _are_dependencies_of_lockfiles_updated(registry_packages, local_packages)


def read_lockfile(path: str | Path) -> list[LockedPackage]:
    """Read the package entries of a lockfile."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LockfileError(f"can't read lockfile: {exc}") from exc
    try:
        data = tomllib.loads(content)
        entries = data["package"]
        return [LockedPackage(str(e["name"]), str(e["version"])) for e in entries]
    except (tomllib.TOMLDecodeError, KeyError, TypeError) as exc:
        raise LockfileError(f"invalid format of lockfile {str(path)!r}: {exc}") from exc


def _are_dependencies_of_lockfiles_updated(
    registry_packages: list[LockedPackage], local_packages: list[LockedPackage]
) -> bool:
    # Iterate over the registry packages: the local lockfile can hold more packages,
    # e.g. those of dev dependencies, at versions different from the normal ones.
    local_versions: dict[str, set[str]] = defaultdict(set)
    for pkg in local_packages:
        local_versions[pkg.name].add(pkg.version)
    for pkg in registry_packages:
        versions = local_versions.get(pkg.name)
        if versions is not None and pkg.version not in versions:
            log.debug("Version of package %s changed to version %s", pkg.name, pkg.version)
            return True
    return False