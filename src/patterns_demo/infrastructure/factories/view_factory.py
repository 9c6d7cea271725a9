"""Named-view factory backed by Jinja2."""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from jinja2 import (
    BaseLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
)

from patterns_demo.domain.base.exceptions import EntityNotFoundError
from patterns_demo.infrastructure.logging.logger import get_logger


class ViewNotFoundError(EntityNotFoundError):
    """Raised when no template exists for a view name."""

    def __init__(self, name: str):
        super().__init__("View", name)


@dataclass(frozen=True)
class View:
    """A template bound to the data it will be rendered with."""
    name: str
    template: Template = field(repr=False, compare=False)
    data: Dict[str, Any] = field(default_factory=dict)

    def render(self) -> str:
        return self.template.render(**self.data)

    def __str__(self) -> str:
        return self.render()


class ViewFactory:
    """
    Looks up a view template by name and binds data to it.

    View names use dots for directories, so ``orders.summary`` resolves to
    ``orders/summary.txt.j2`` with the default suffix.
    """

    def __init__(self, environment: Environment, template_suffix: str = ".txt.j2", logger: Any = None):
        self._environment = environment
        self._template_suffix = template_suffix
        self._logger = logger or get_logger(__name__)

    @classmethod
    def from_directory(cls, templates_dir: Optional[str] = None, template_suffix: str = ".txt.j2",
                       logger: Any = None) -> "ViewFactory":
        """Build a factory reading templates from a directory, or from the packaged templates."""
        loader: BaseLoader
        if templates_dir:
            loader = FileSystemLoader(templates_dir)
        else:
            loader = PackageLoader("patterns_demo", "templates")
        environment = Environment(
            loader=loader,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )
        return cls(environment, template_suffix=template_suffix, logger=logger)

    def template_path(self, name: str) -> str:
        return name.replace(".", "/") + self._template_suffix

    def exists(self, name: str) -> bool:
        return self.template_path(name) in self._environment.list_templates()

    def make(self, name: str, data: Optional[Mapping[str, Any]] = None) -> View:
        """
        Build the named view.

        Raises:
            ViewNotFoundError: If no template exists for ``name``
        """
        path = self.template_path(name)
        try:
            template = self._environment.get_template(path)
        except TemplateNotFound:
            self._logger.warning("View template not found", view=name, path=path)
            raise ViewNotFoundError(name)
        self._logger.debug("View created", view=name)
        return View(name=name, template=template, data=dict(data or {}))
