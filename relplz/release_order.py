"""Order packages so that each comes after the dependencies it must be released after."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from relplz.package import Dependency, DependencyKind, Package

log = logging.getLogger(__name__)


class CircularDependencyError(Exception):
    """The packages depend on each other in a cycle."""


def release_order(packages: Sequence[Package]) -> list[Package]:
    """Return the packages in an order in which they can be released.

    Raises CircularDependencyError if a circular dependency is detected.
    """
    order: list[Package] = []
    passed: list[Package] = []
    for pkg in packages:
        _release_order_inner(packages, pkg, order, passed)
    log.debug("Release order: %s", [p.name for p in order])
    return order


def _release_order_inner(
    packages: Sequence[Package],
    pkg: Package,
    order: list[Package],
    passed: list[Package],
) -> None:
    if _is_package_in(pkg, order):
        return
    passed.append(pkg)

    for dep in pkg.dependencies:
        found = next(
            (
                p
                for p in packages
                if dep.name == p.name
                and p.name != pkg.name
                and should_dep_be_released_before(dep, pkg)
            ),
            None,
        )
        if found is None:
            continue
        if _is_package_in(found, passed):
            raise CircularDependencyError(
                f"Circular dependency detected: {found.name} -> {pkg.name}"
            )
        _release_order_inner(packages, found, order, passed)

    order.append(pkg)
    passed.clear()


def _is_package_in(pkg: Package, packages: Sequence[Package]) -> bool:
    return any(p.name == pkg.name for p in packages)


def is_dep_in_features(package: Package, dep: str) -> bool:
    """Return True if any feature of `package` enables `dep` as `dep/feature`."""
    return any(
        feature.split("/", 1)[0] == dep
        for enabled in package.features.values()
        for feature in enabled
        if "/" in feature
    )


def should_dep_be_released_before(dep: Dependency, package: Package) -> bool:
    """Return True if `dep` must be released before `package`.

    Development dependencies don't need to be, unless a feature enables them.
    """
    return dep.kind in (DependencyKind.NORMAL, DependencyKind.BUILD) or is_dep_in_features(
        package, dep.name
    )