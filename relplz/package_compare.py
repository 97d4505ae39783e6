"""Compare a local package with the one published in the registry."""

from __future__ import annotations

import filecmp
import logging
import subprocess
from pathlib import Path

from relplz.package import Package

log = logging.getLogger(__name__)

_CARGO_TOML = "Cargo.toml"
_ORIG = "Cargo.toml.orig"
_ORIG_ORIG = "Cargo.toml.orig.orig"
_VCS_INFO = ".cargo_vcs_info.json"


class CargoPackageError(Exception):
    """Listing the files of a package failed."""


def are_packages_equal(local_package: str | Path, registry_package: str | Path) -> bool:
    """Return True if the local package has the same files as the registry package."""
    local_package = Path(local_package)
    registry_package = Path(registry_package)
    log.debug(
        "compare local package %s with registry package %s", local_package, registry_package
    )
    if not _are_cargo_toml_equal(local_package, registry_package):
        log.debug("Cargo.toml is different")
        return False

    # The name of the published original manifest is reserved by the packaging
    # tool, so move it aside while listing the files.
    orig = registry_package / _ORIG
    moved = registry_package / _ORIG_ORIG
    _rename(orig, moved)
    try:
        try:
            local_list = get_cargo_package_files(local_package)
        except CargoPackageError as exc:
            raise CargoPackageError(
                f"cannot determine packaged files of local package {str(local_package)!r}: {exc}"
            ) from exc
        try:
            registry_list = get_cargo_package_files(registry_package)
        except CargoPackageError as exc:
            raise CargoPackageError(
                "cannot determine packaged files of registry package "
                f"{str(registry_package)!r}: {exc}"
            ) from exc
    finally:
        _rename(moved, orig)

    local_files = [f for f in local_list if str(f) not in {_ORIG, _VCS_INFO}]
    registry_files = [f for f in registry_list if str(f) not in {_ORIG, _ORIG_ORIG, _VCS_INFO}]
    if local_files != registry_files:
        log.debug("cargo package list is different")
        return False

    for relative in local_files:
        local_path = local_package / relative
        if (
            local_path.is_symlink()
            # The listing can name files that don't exist locally, such as a README
            # taken from another path.
            or not local_path.exists()
            or local_path.name in {"Cargo.lock", _CARGO_TOML, _ORIG}
        ):
            continue
        if not are_files_equal(local_path, registry_package / relative):
            return False
    return True


def _rename(src: Path, dst: Path) -> None:
    try:
        src.rename(dst)
    except OSError as exc:
        raise OSError(f"cannot rename {str(src)!r} to {str(dst)!r}: {exc}") from exc


def get_cargo_package_files(package: str | Path) -> list[Path]:
    """Return the files that packaging would include, relative to the package."""
    # `--allow-dirty` because the moved original manifest is an uncommitted change.
    cmd = ["cargo", "package", "--list", "--quiet", "--allow-dirty"]
    try:
        output = subprocess.run(
            cmd, cwd=Path(package), capture_output=True, text=True, check=False
        )
    except OSError as exc:
        raise CargoPackageError(f"cannot run `cargo package`: {exc}") from exc
    if output.returncode != 0:
        raise CargoPackageError(f"error while running `cargo package`: {output.stderr}")
    return [Path(line) for line in output.stdout.splitlines() if line]


def _are_cargo_toml_equal(local_package: Path, registry_package: Path) -> bool:
    try:
        return are_files_equal(local_package / _CARGO_TOML, registry_package / _ORIG)
    except OSError:
        return False


def local_readme_override(package: Package, local_package_path: str | Path) -> Path | None:
    """Path of the README declared by the package, if it declares one."""
    if package.readme is None:
        return None
    return Path(local_package_path) / package.readme


def are_files_equal(first: str | Path, second: str | Path) -> bool:
    """Return True if the two files have the same content."""
    return filecmp.cmp(first, second, shallow=False)