"""Compare the manifest dependencies of a local package with its published version."""

from __future__ import annotations

from collections.abc import Iterable

from relplz.package import Dependency


def are_toml_dependencies_updated(
    registry_dependencies: Iterable[Dependency],
    local_dependencies: Iterable[Dependency],
) -> bool:
    """Return True if a non-path local dependency is missing from the registry ones."""
    registry_dependencies = list(registry_dependencies)
    return any(
        dep.path is None
        and not any(are_dependencies_equal(dep, reg) for reg in registry_dependencies)
        for dep in local_dependencies
    )


def are_dependencies_equal(local_dep: Dependency, registry_dep: Dependency) -> bool:
    """Compare two dependency entries, ignoring their local path."""
    return (
        local_dep.name == registry_dep.name
        and local_dep.req == registry_dep.req
        and local_dep.kind == registry_dep.kind
        and local_dep.optional == registry_dep.optional
        and local_dep.uses_default_features == registry_dep.uses_default_features
        and local_dep.features == registry_dep.features
        and local_dep.target == registry_dep.target
        and local_dep.rename == registry_dep.rename
        and local_dep.registry == registry_dep.registry
        and is_source_equal(local_dep.source, registry_dep.source)
    )


def is_source_equal(local_source: str | None, registry_source: str | None) -> bool:
    """Compare dependency sources; git sources always match since they can't be published."""
    if local_source is None and registry_source is None:
        return True
    if local_source is None or registry_source is None:
        return False
    if local_source.startswith("git+"):
        return True
    return local_source == registry_source