"""New-script templates for classes extending host classes."""

from __future__ import annotations

from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader

from ..logging import get_logger
from .language import OBJECT_NAMESPACE

DEFAULT_TEMPLATE = "script_class.jsx.j2"

CLASS_PLACEHOLDER = "%CLASS%"
BASE_PLACEHOLDER = "%BASE%"


def fill_template_placeholders(source: str, class_name: str, base_class_name: str) -> str:
    """Substitute ``%CLASS%`` and ``%BASE%`` in an existing template source."""
    return source.replace(BASE_PLACEHOLDER, base_class_name).replace(CLASS_PLACEHOLDER, class_name)


class ScriptTemplateRenderer:
    """Renders script skeletons, preferring a project templates directory."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        object_namespace: str | None = None,
    ) -> None:
        self.templates_dir = templates_dir
        self.object_namespace = object_namespace or OBJECT_NAMESPACE
        self._env = self._create_env(templates_dir)
        self.logger = get_logger("scripting")

    def render(
        self,
        class_name: str,
        base_class_name: str,
        *,
        template_name: str = DEFAULT_TEMPLATE,
    ) -> str:
        template = self._env.get_template(template_name)
        self.logger.debug("Rendering %s for %s(%s)", template_name, class_name, base_class_name)
        rendered = template.render(
            class_name=class_name,
            base_class_name=base_class_name,
            object_namespace=self.object_namespace,
        )
        rendered = fill_template_placeholders(rendered, class_name, base_class_name)
        return rendered.rstrip("\n") + "\n"

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        default_dir = str(Path(__file__).with_name("templates"))
        if default_dir not in directories:
            directories.append(default_dir)
        loader = FileSystemLoader(directories)
        return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


__all__ = ["DEFAULT_TEMPLATE", "ScriptTemplateRenderer", "fill_template_placeholders"]
