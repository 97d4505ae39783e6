"""Render the templates of tag names, release names and release bodies."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

import jinja2

PACKAGE_VAR = "package"
VERSION_VAR = "version"
CHANGELOG_VAR = "changelog"
REMOTE_VAR = "remote"


@dataclass
class Remote:
    """The remote repository a release belongs to."""

    owner: str
    repo: str
    link: str
    contributors: list[Any] = field(default_factory=list)


def tera_var(var_name: str) -> str:
    """Return the template expression that prints `var_name`."""
    return f"{{{{ {var_name} }}}}"


def tera_context(package_name: str, version: str) -> dict[str, Any]:
    """Return the variables common to every template."""
    return {PACKAGE_VAR: package_name, VERSION_VAR: version}


def render_template(template: str, context: dict[str, Any], template_name: str) -> str:
    """Render `template` with `context`; raise ValueError if it can't be rendered."""
    env = jinja2.Environment(
        autoescape=False,
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
    )
    try:
        return env.from_string(template).render(context)
    except jinja2.TemplateError as exc:
        raise ValueError(f"failed to render {template_name}: {exc}") from exc


def release_body_from_template(
    package_name: str,
    version: str,
    changelog: str,
    remote: Remote,
    body_template: str | None = None,
) -> str:
    """Render the body of a release; by default it is the changelog itself."""
    context = tera_context(package_name, version)
    context[CHANGELOG_VAR] = changelog
    context[REMOTE_VAR] = asdict(remote)
    template = body_template if body_template is not None else tera_var(CHANGELOG_VAR)
    return render_template(template, context, "release_body")