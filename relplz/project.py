"""The packages of a workspace that take part in a release, and their names."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from relplz.package import Package
from relplz.templates import (
    PACKAGE_VAR,
    VERSION_VAR,
    render_template,
    tera_context,
    tera_var,
)
from relplz.update_config import ReleaseMetadata
from relplz.workspace import is_publishable

log = logging.getLogger(__name__)


class ProjectError(Exception):
    """The project can't be set up from the given packages and settings."""


class ReleaseMetadataBuilder(Protocol):
    """Anything that tells whether, and how, a package is released."""

    def get_release_metadata(self, package_name: str) -> ReleaseMetadata | None: ...


def _debug_list(names: Iterable[str]) -> str:
    return "[" + ", ".join(f'"{name}"' for name in names) + "]"


class Project:
    """The packages to release, with the templates of their tags and release names."""

    def __init__(
        self,
        packages: list[Package],
        release_metadata: dict[str, ReleaseMetadata],
        root: Path,
        manifest_dir: Path,
        contains_multiple_pub_packages: bool,
    ) -> None:
        self.packages = packages
        self.release_metadata = release_metadata
        self.root = root
        self.manifest_dir = manifest_dir
        # Counted before `single_package` narrows the packages down.
        self.contains_multiple_pub_packages = contains_multiple_pub_packages

    @classmethod
    def from_packages(
        cls,
        packages: Iterable[Package],
        root: str | Path,
        manifest_dir: str | Path,
        release_metadata_builder: ReleaseMetadataBuilder,
        single_package: str | None = None,
        overrides: Iterable[str] | None = None,
    ) -> Project:
        """Build the project from the workspace packages.

        Only packages that the builder marks as released are kept. Raises
        ProjectError if an override names an unknown package, if no package is
        released, or if `single_package` is not among the released ones.
        """
        packages = list(packages)
        root = Path(root)
        manifest_dir = Path(manifest_dir)
        log.debug("manifest_dir: %s", manifest_dir)
        log.debug("project_root: %s", root)
        check_for_typos({p.name for p in packages}, set(overrides or ()))

        packages_names = [p.name for p in packages]
        release_metadata: dict[str, ReleaseMetadata] = {}
        released = []
        for package in packages:
            metadata = release_metadata_builder.get_release_metadata(package.name)
            if metadata is not None:
                release_metadata[package.name] = metadata
                released.append(package)
        if not released:
            raise ProjectError(
                "no public packages found. Are there any public packages in your project? "
                f"Analyzed packages: {_debug_list(packages_names)}"
            )

        contains_multiple_pub_packages = len(released) > 1

        if single_package is not None:
            released = [p for p in released if p.name == single_package]
            if not released:
                raise ProjectError(
                    f"package `{single_package}` not found. If it exists, is it public?"
                )

        return cls(
            packages=released,
            release_metadata=release_metadata,
            root=root,
            manifest_dir=manifest_dir,
            contains_multiple_pub_packages=contains_multiple_pub_packages,
        )

    def publishable_packages(self) -> list[Package]:
        """Packages that can be published to a registry."""
        return [p for p in self.packages if is_publishable(p)]

    def workspace_packages(self) -> list[Package]:
        """All packages of the project, including non-publishable ones."""
        return list(self.packages)

    def _default_template(self) -> str:
        if self.contains_multiple_pub_packages:
            return f"{tera_var(PACKAGE_VAR)}-v{tera_var(VERSION_VAR)}"
        return f"v{tera_var(VERSION_VAR)}"

    def git_tag(self, package_name: str, version: str) -> str:
        """Name of the git tag of `package_name` at `version`."""
        metadata = self.release_metadata.get(package_name)
        template = metadata.tag_name_template if metadata else None
        if template is None:
            template = self._default_template()
        return render_template(template, tera_context(package_name, version), "tag_name")

    def release_name(self, package_name: str, version: str) -> str:
        """Name of the release of `package_name` at `version`."""
        metadata = self.release_metadata.get(package_name)
        template = metadata.release_name_template if metadata else None
        if template is None:
            template = self._default_template()
        return render_template(
            template, tera_context(package_name, version), "release_name"
        )

    def cargo_lock_path(self) -> Path:
        """Path of the lockfile at the project root."""
        return self.root / "Cargo.lock"


def check_for_typos(packages: Iterable[str], overrides: Iterable[str]) -> None:
    """Raise ProjectError if an override names a package that is not in the workspace."""
    missing = sorted(set(overrides) - set(packages))
    if missing:
        names = ", ".join(f"`{name}`" for name in missing)
        raise ProjectError(
            f"The following overrides are not present in the workspace: {names}. "
            "Check for typos"
        )


def new_project_root(
    original_project_root: str | Path, new_project_root_parent: str | Path
) -> Path:
    """Where the project root lands when copied into `new_project_root_parent`."""
    dirname = Path(original_project_root).name
    if not dirname:
        raise ProjectError("cannot get project root dirname")
    return Path(new_project_root_parent) / dirname