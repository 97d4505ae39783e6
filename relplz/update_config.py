"""Configuration of how packages are updated, with per-package overrides."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from pathlib import Path


@dataclass(frozen=True)
class ReleaseMetadata:
    """Templates used when releasing a package."""

    tag_name_template: str | None = None
    release_name_template: str | None = None


@dataclass(frozen=True)
class UpdateConfig:
    """Update settings that apply to a package."""

    # Relative to the directory of the workspace manifest.
    changelog_path: Path | None = None
    semver_check: bool = True
    changelog_update: bool = True
    release: bool = True
    features_always_increment_minor: bool = False
    tag_name_template: str | None = None

    def __post_init__(self) -> None:
        if self.changelog_path is not None:
            object.__setattr__(self, "changelog_path", Path(self.changelog_path))

    def with_semver_check(self, semver_check: bool) -> UpdateConfig:
        """Return a copy with `semver_check` set."""
        return replace(self, semver_check=semver_check)

    def with_features_always_increment_minor(
        self, features_always_increment_minor: bool
    ) -> UpdateConfig:
        """Return a copy with `features_always_increment_minor` set."""
        return replace(
            self, features_always_increment_minor=features_always_increment_minor
        )

    def with_changelog_update(self, changelog_update: bool) -> UpdateConfig:
        """Return a copy with `changelog_update` set."""
        return replace(self, changelog_update=changelog_update)


@dataclass
class PackageUpdateConfig:
    """Update settings of one package."""

    generic: UpdateConfig = field(default_factory=UpdateConfig)
    # Names of packages whose changes also go into this package's changelog.
    changelog_include: list[str] = field(default_factory=list)
    version_group: str | None = None

    @classmethod
    def from_config(cls, config: UpdateConfig) -> PackageUpdateConfig:
        """Package settings that only carry the generic ones."""
        return cls(generic=config)

    def semver_check(self) -> bool:
        """Whether the API compatibility check should run."""
        return self.generic.semver_check

    def should_update_changelog(self) -> bool:
        """Whether the changelog should be created or updated."""
        return self.generic.changelog_update


@dataclass
class PackagesConfig:
    """Default update settings and the per-package overrides of them."""

    default: UpdateConfig = field(default_factory=UpdateConfig)
    overrides: dict[str, PackageUpdateConfig] = field(default_factory=dict)

    def get(self, package_name: str) -> PackageUpdateConfig:
        """Return a copy of the settings that apply to `package_name`."""
        override = self.overrides.get(package_name)
        if override is not None:
            return copy.deepcopy(override)
        return PackageUpdateConfig.from_config(self.default)

    def set_default(self, config: UpdateConfig) -> None:
        """Replace the settings of packages without an override."""
        self.default = config

    def set(self, package_name: str, config: PackageUpdateConfig) -> None:
        """Override the settings of `package_name`."""
        self.overrides[package_name] = config

    def get_release_metadata(self, package_name: str) -> ReleaseMetadata | None:
        """Release templates of the package, or None if it is not released."""
        config = self.get(package_name)
        if not config.generic.release:
            return None
        return ReleaseMetadata(
            tag_name_template=config.generic.tag_name_template,
            release_name_template=None,
        )