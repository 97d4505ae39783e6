import pytest

from relplz.lock_compare import (
    LockedPackage,
    LockfileError,
    are_lock_dependencies_updated,
    read_lockfile,
)


def _lock(packages):
    return "".join(
        f'[[package]]\nname = "{name}"\nversion = "{version}"\n\n'
        for name, version in packages
    )


@pytest.fixture
def lock_pair(tmp_path):
    registry_dir = tmp_path / "registry"
    registry_dir.mkdir()
    local_lock = tmp_path / "Cargo.lock"

    def write(local, registry):
        local_lock.write_text(_lock(local))
        (registry_dir / "Cargo.lock").write_text(_lock(registry))
        return local_lock, registry_dir

    return write


def test_read_lockfile_returns_entries(tmp_path):
    path = tmp_path / "Cargo.lock"
    path.write_text(_lock([("serde", "1.0.0"), ("anyhow", "1.0.1")]))
    assert read_lockfile(path) == [
        LockedPackage("serde", "1.0.0"),
        LockedPackage("anyhow", "1.0.1"),
    ]


def test_missing_files_mean_not_updated(tmp_path):
    assert are_lock_dependencies_updated(tmp_path / "Cargo.lock", tmp_path) is False


def test_same_versions_are_not_updated(lock_pair):
    pkgs = [("serde", "1.0.0"), ("anyhow", "1.0.1")]
    local, registry = lock_pair(pkgs, pkgs)
    assert are_lock_dependencies_updated(local, registry) is False


def test_changed_version_is_updated(lock_pair):
    local, registry = lock_pair([("serde", "1.0.1")], [("serde", "1.0.0")])
    assert are_lock_dependencies_updated(local, registry) is True


def test_one_matching_version_among_many_is_enough(lock_pair):
    local, registry = lock_pair(
        [("rand", "0.7.0"), ("rand", "0.8.0")], [("rand", "0.8.0")]
    )
    assert are_lock_dependencies_updated(local, registry) is False


def test_packages_only_in_registry_are_ignored(lock_pair):
    local, registry = lock_pair([("serde", "1.0.0")], [("serde", "1.0.0"), ("old", "0.1.0")])
    assert are_lock_dependencies_updated(local, registry) is False


def test_packages_added_locally_are_ignored(lock_pair):
    local, registry = lock_pair([("serde", "1.0.0"), ("new", "0.1.0")], [("serde", "1.0.0")])
    assert are_lock_dependencies_updated(local, registry) is False


def test_invalid_toml_raises(tmp_path):
    path = tmp_path / "Cargo.lock"
    path.write_text("[[package]\nname = ")
    with pytest.raises(LockfileError, match="invalid format"):
        read_lockfile(path)


def test_missing_package_table_raises(tmp_path):
    path = tmp_path / "Cargo.lock"
    path.write_text("version = 3\n")
    with pytest.raises(LockfileError):
        read_lockfile(path)


def test_invalid_local_lock_raises_during_compare(tmp_path):
    registry_dir = tmp_path / "registry"
    registry_dir.mkdir()
    (registry_dir / "Cargo.lock").write_text(_lock([("serde", "1.0.0")]))
    local = tmp_path / "Cargo.lock"
    local.write_text("not = [valid")
    with pytest.raises(LockfileError, match="local package"):
        are_lock_dependencies_updated(local, registry_dir)