"""Thin wrapper around Jinja2 for the packaged unit file templates."""

from __future__ import annotations

from typing import Any, Dict

from jinja2 import Environment, PackageLoader, StrictUndefined, Template

_ENV = Environment(
    loader=PackageLoader("unitard", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)


def get_template(name: str) -> Template:
    return _ENV.get_template(name)


def render_template(template: Template, context: Dict[str, Any]) -> str:
    return template.render(**context)
