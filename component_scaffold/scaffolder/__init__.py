"""Component scaffolder -- generates component folders from templates.

Two generation paths share the same key substitution and file writer:

- built-in templates, driven by a :class:`GenerationRequest`
- custom template directories, copied with their placeholder keys replaced

Quick usage::

    from component_scaffold.scaffolder import GenerationRequest, generate_files

    request = GenerationRequest(name="Button", path="src/components", type="class")
    written = await generate_files(request)

    result = await generate_files_from_template("Button", "src/components", "templates/ui")
"""

from component_scaffold.scaffolder.custom import (
    MaterializationResult,
    generate_files_from_custom,
    generate_files_from_template,
)
from component_scaffold.scaffolder.files import list_subdirectories, read_text, write_file
from component_scaffold.scaffolder.generator import (
    GenerationRequest,
    OutputFile,
    build_output_files,
    generate_files,
    resolve_file_names,
)
from component_scaffold.scaffolder.keys import PLACEHOLDER_KEYS, replace_keys
from component_scaffold.scaffolder.templates import (
    TemplateRenderer,
    generate_component_template,
    generate_index_file,
    generate_storybook_template,
    generate_style_file,
    generate_test_template,
)

__all__ = [
    "GenerationRequest",
    "MaterializationResult",
    "OutputFile",
    "PLACEHOLDER_KEYS",
    "TemplateRenderer",
    "build_output_files",
    "generate_component_template",
    "generate_files",
    "generate_files_from_custom",
    "generate_files_from_template",
    "generate_index_file",
    "generate_storybook_template",
    "generate_style_file",
    "generate_test_template",
    "list_subdirectories",
    "read_text",
    "replace_keys",
    "resolve_file_names",
    "write_file",
]
