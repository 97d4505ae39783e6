"""Package metadata as reported for a workspace, and helpers for its paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class DependencyKind(Enum):
    """The section of the manifest a dependency is declared in."""

    NORMAL = "normal"
    DEVELOPMENT = "dev"
    BUILD = "build"


@dataclass
class Dependency:
    """A dependency entry of a package manifest."""

    name: str
    req: str = "*"
    kind: DependencyKind = DependencyKind.NORMAL
    optional: bool = False
    uses_default_features: bool = True
    features: list[str] = field(default_factory=list)
    target: str | None = None
    rename: str | None = None
    registry: str | None = None
    source: str | None = None
    path: Path | None = None

    def __post_init__(self) -> None:
        if self.path is not None:
            self.path = Path(self.path)


@dataclass
class Target:
    """A build target of a package (library, binary, example, ...)."""

    name: str
    kind: list[str] = field(default_factory=lambda: ["lib"])


@dataclass
class Package:
    """A package of the workspace."""

    name: str
    version: str = "0.1.0"
    manifest_path: Path = field(default_factory=lambda: Path("Cargo.toml"))
    dependencies: list[Dependency] = field(default_factory=list)
    targets: list[Target] = field(default_factory=list)
    features: dict[str, list[str]] = field(default_factory=dict)
    publish: list[str] | None = None
    readme: Path | None = None

    def __post_init__(self) -> None:
        self.manifest_path = Path(self.manifest_path)
        if self.readme is not None:
            self.readme = Path(self.readme)

    def package_path(self) -> Path:
        """Directory containing the package manifest."""
        return manifest_dir(self.manifest_path)

    def canonical_path(self) -> Path:
        """Absolute, symlink-free directory of the package; it must exist."""
        return self.package_path().resolve(strict=True)


def manifest_dir(manifest: str | Path) -> Path:
    """Return the directory where `manifest` is located."""
    manifest = Path(manifest)
    parent = manifest.parent
    if parent == manifest:
        raise ValueError(
            f"Cannot find directory where manifest {str(manifest)!r} is located"
        )
    return parent