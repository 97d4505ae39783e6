from pathlib import Path

from relplz.update_config import (
    PackagesConfig,
    PackageUpdateConfig,
    ReleaseMetadata,
    UpdateConfig,
)


def test_update_config_defaults():
    config = UpdateConfig()
    assert config.semver_check is True
    assert config.changelog_update is True
    assert config.release is True
    assert config.features_always_increment_minor is False
    assert config.tag_name_template is None
    assert config.changelog_path is None


def test_changelog_path_is_converted_to_path():
    config = UpdateConfig(changelog_path="docs/CHANGELOG.md")
    assert config.changelog_path == Path("docs/CHANGELOG.md")


def test_with_methods_return_new_config():
    base = UpdateConfig()
    changed = (
        base.with_semver_check(False)
        .with_changelog_update(False)
        .with_features_always_increment_minor(True)
    )
    assert changed.semver_check is False
    assert changed.changelog_update is False
    assert changed.features_always_increment_minor is True
    assert base == UpdateConfig()
    assert changed.release == base.release


def test_package_config_from_config_wraps_generic():
    generic = UpdateConfig().with_semver_check(False)
    pkg = PackageUpdateConfig.from_config(generic)
    assert pkg.generic == generic
    assert pkg.changelog_include == []
    assert pkg.version_group is None
    assert pkg.semver_check() is False
    assert pkg.should_update_changelog() is True


def test_get_without_override_uses_default():
    packages = PackagesConfig()
    packages.set_default(UpdateConfig().with_changelog_update(False))
    config = packages.get("foo")
    assert config.should_update_changelog() is False
    assert config == PackageUpdateConfig.from_config(packages.default)


def test_override_takes_precedence():
    packages = PackagesConfig()
    override = PackageUpdateConfig(
        generic=UpdateConfig().with_semver_check(False),
        changelog_include=["bar"],
        version_group="group",
    )
    packages.set("foo", override)
    assert packages.get("foo") == override
    assert packages.get("other") == PackageUpdateConfig()


def test_get_returns_a_copy():
    packages = PackagesConfig()
    packages.set("foo", PackageUpdateConfig(changelog_include=["bar"]))
    got = packages.get("foo")
    got.changelog_include.append("baz")
    assert packages.get("foo").changelog_include == ["bar"]


def test_release_metadata_carries_tag_template():
    packages = PackagesConfig()
    packages.set_default(UpdateConfig(tag_name_template="v{{ version }}"))
    assert packages.get_release_metadata("foo") == ReleaseMetadata(
        tag_name_template="v{{ version }}", release_name_template=None
    )


def test_release_metadata_absent_when_release_disabled():
    packages = PackagesConfig()
    packages.set("foo", PackageUpdateConfig(generic=UpdateConfig(release=False)))
    assert packages.get_release_metadata("foo") is None
    assert packages.get_release_metadata("bar") == ReleaseMetadata()