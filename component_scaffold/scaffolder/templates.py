"""Built-in component templates.

Provides the :class:`TemplateRenderer` that loads the Jinja2 templates
shipped in ``component_scaffold/scaffolder/templates/`` and a set of pure
functions producing the content of each generated artifact:

- the component body (functional ``stateless`` or class-style ``class`` /
  ``pure`` with one stub per requested method)
- the style file
- the index (barrel) file, optionally wrapped with react-redux ``connect``
- the test file
- the storybook story

None of these functions touch the file system.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from component_scaffold.errors import InvalidArgumentError

from .keys import CAMEL_KEY, placeholder_values, validate_name


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

# component type -> (template, base class)
COMPONENT_TYPES: dict[str, tuple[str, str | None]] = {
    "stateless": ("component/stateless.js.j2", None),
    "class": ("component/class.js.j2", "Component"),
    "pure": ("component/class.js.j2", "PureComponent"),
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the Jinja2 templates used for built-in generation.

    Templates live under a configurable directory; the default is the one
    packaged next to this module.  Rendering is deterministic: the same
    context always produces byte-identical output.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["camel_first"] = _camel_first_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"component/class.js.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


@lru_cache(maxsize=1)
def default_renderer() -> TemplateRenderer:
    """Return the shared renderer for the packaged templates."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Content generators
# ---------------------------------------------------------------------------


def generate_component_template(
    component_type: str,
    name: str,
    *,
    css_extension: str | None = None,
    component_methods: Iterable[str] = (),
    style_file_name: str | None = None,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return the body of the component file.

    Args:
        component_type: ``"stateless"``, ``"class"`` or ``"pure"``.
        name: Component identifier.
        css_extension: Extension of the style file to import, or ``None`` to
            generate a component without styles.
        component_methods: Method names to stub.  Only used by class-style
            components; duplicates and ``render`` are dropped since each
            method must appear once.
        style_file_name: Style file name without extension.  Defaults to
            *name*.
        renderer: Renderer to use instead of the packaged one.

    Raises:
        InvalidArgumentError: If *name* is empty or *component_type* unknown.
    """
    validate_name(name)
    try:
        template_path, base_class = COMPONENT_TYPES[component_type]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown component type {component_type!r}; "
            f"expected one of {', '.join(COMPONENT_TYPES)}"
        ) from None

    methods: list[str] = []
    if base_class is not None:
        for method in component_methods:
            method = method.strip()
            if method and method != "render" and method not in methods:
                methods.append(method)

    context = {
        "name": name,
        "base_class": base_class,
        "css_extension": css_extension,
        "style_file_name": style_file_name or name,
        "component_methods": methods,
    }
    return (renderer or default_renderer()).render(template_path, context)


def generate_style_file(name: str, *, renderer: TemplateRenderer | None = None) -> str:
    """Return the body of the style file for component *name*."""
    validate_name(name)
    context = {"name": name}
    return (renderer or default_renderer()).render("style.css.j2", context)


def generate_index_file(
    component_file_name: str,
    connected: bool = False,
    *,
    name: str | None = None,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return the index file re-exporting the component.

    When *connected* is true the default export is wrapped with react-redux
    ``connect``; *name* is the identifier used for the import and defaults
    to *component_file_name*.
    """
    validate_name(component_file_name)
    context = {
        "name": name or component_file_name,
        "component_file_name": component_file_name,
        "connected": connected,
    }
    return (renderer or default_renderer()).render("index.js.j2", context)


def generate_test_template(
    name: str,
    component_file_name: str | None = None,
    *,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return a snapshot test importing the component file."""
    validate_name(name)
    context = {"name": name, "component_file_name": component_file_name or name}
    return (renderer or default_renderer()).render("test.js.j2", context)


def generate_storybook_template(
    name: str,
    component_file_name: str | None = None,
    *,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return a storybook story for the component."""
    validate_name(name)
    context = {"name": name, "component_file_name": component_file_name or name}
    return (renderer or default_renderer()).render("story.js.j2", context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------


def _camel_first_filter(value: str) -> str:
    """Lower the first character: ``MyButton`` -> ``myButton``."""
    return placeholder_values(value)[CAMEL_KEY]
