"""Check the API compatibility of a package with its published version."""

from __future__ import annotations

import re
import shutil
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

_ANSI_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]|\x1b[@-Z\\-_]")
_TOOL = "cargo-semver-checks"


class SemverOutcome(Enum):
    """Result of a semver check."""

    COMPATIBLE = "compatible"
    INCOMPATIBLE = "incompatible"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class SemverCheck:
    """Outcome of a semver check, with the tool's report when incompatible."""

    outcome: SemverOutcome
    details: str | None = None

    def outcome_str(self) -> str:
        """Short description of the outcome to append to log lines."""
        if self.outcome is SemverOutcome.COMPATIBLE:
            return " (✓ API compatible changes)"
        if self.outcome is SemverOutcome.INCOMPATIBLE:
            return " (⚠️ API breaking changes)"
        return ""


def is_cargo_semver_checks_installed() -> bool:
    """Return True if the semver checking tool can be run."""
    try:
        result = subprocess.run([_TOOL, "--version"], capture_output=True, check=False)
    except OSError:
        return False
    return result.returncode == 0


def run_semver_check(local_package: str | Path, registry_package: str | Path) -> SemverCheck:
    """Compare the API of the local package with the registry one.

    Files the tool leaves behind (lockfile, target directory) are removed afterwards.
    """
    local_package = Path(local_package)
    registry_package = Path(registry_package)
    created = [
        path
        for path in (
            local_package / "Cargo.lock",
            registry_package / "Cargo.lock",
            local_package / "target",
            registry_package / "target",
        )
        if not path.exists()
    ]

    cmd = [
        _TOOL,
        "semver-checks",
        "check-release",
        "--manifest-path",
        str(local_package / "Cargo.toml"),
        "--baseline-root",
        str(registry_package / "Cargo.toml"),
    ]
    try:
        output = subprocess.run(cmd, capture_output=True, check=False)
    except OSError as exc:
        raise RuntimeError(
            f"error while running cargo-semver-checks on {str(local_package)!r}"
        ) from exc

    for path in created:
        if path.is_dir():
            shutil.rmtree(path)
        elif path.exists():
            path.unlink()

    if output.returncode == 0:
        return SemverCheck(SemverOutcome.COMPATIBLE)
    stderr = output.stderr.decode("utf-8")
    if "semver requires new major version" not in stderr:
        return SemverCheck(SemverOutcome.COMPATIBLE)
    stdout = _ANSI_RE.sub("", output.stdout.decode("utf-8"))
    if not stdout:
        raise RuntimeError("unknown source of semver incompatibility")
    return SemverCheck(SemverOutcome.INCOMPATIBLE, stdout)