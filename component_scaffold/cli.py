"""Command-line entry point.

Usage::

    component-scaffold Button Card -o src/components --type class --stories
    component-scaffold Button --templates ./templates --template form
    python -m component_scaffold.cli Button --nocss --notest
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any

from component_scaffold.config import ScaffoldConfig, load_config
from component_scaffold.errors import InvalidArgumentError, ScaffoldError
from component_scaffold.scaffolder import (
    GenerationRequest,
    generate_files,
    generate_files_from_template,
    list_subdirectories,
)
from component_scaffold.scaffolder.files import iter_template_files
from component_scaffold.scaffolder.templates import COMPONENT_TYPES
from component_scaffold.utils import (
    console,
    print_error,
    print_success,
    print_warning,
    print_written_files,
)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``component-scaffold``."""
    parser = argparse.ArgumentParser(
        prog="component-scaffold",
        description="Generate React component folders from built-in or custom templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  component-scaffold Button\n"
            "  component-scaffold Button Card -o src/components --type class --methods componentDidMount\n"
            "  component-scaffold Button --templates ./templates --template form\n"
        ),
    )

    parser.add_argument("names", nargs="+", help="Component name(s) to generate")
    parser.add_argument("--output", "-o", default=None, help="Destination directory (default: .)")
    parser.add_argument("--config", default=None, help="Explicit JSON configuration file")
    parser.add_argument("--type", choices=sorted(COMPONENT_TYPES), default=None, help="Component type")
    parser.add_argument("--css-ext", default=None, help="Style file extension (default: css)")
    parser.add_argument("--nocss", action="store_true", default=None, help="Do not create a style file")
    parser.add_argument("--js-ext", default=None, help="Script file extension (default: js)")
    parser.add_argument(
        "--methods",
        default=None,
        help="Comma-separated methods to stub in class components",
    )
    parser.add_argument("--index", action="store_true", default=None, help="Create an index file")
    parser.add_argument(
        "--connected",
        action="store_true",
        default=None,
        help="Wrap the index export with react-redux connect",
    )
    parser.add_argument("--stories", action="store_true", default=None, help="Create a storybook story")
    parser.add_argument("--notest", action="store_true", default=None, help="Do not create a test file")
    parser.add_argument(
        "--no-mkdir",
        action="store_true",
        default=None,
        help="Write files directly into the output directory",
    )
    parser.add_argument("--templates", default=None, help="Custom templates directory")
    parser.add_argument(
        "--template",
        default=None,
        help="Template set to use when --templates holds several sets",
    )
    parser.add_argument(
        "--atomic",
        action="store_true",
        help="Stage built-in files and move the folder into place in one step",
    )
    return parser


# ---------------------------------------------------------------------------
# Option mapping
# ---------------------------------------------------------------------------


def request_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Map CLI flags that were actually given to ``GenerationRequest`` fields."""
    overrides: dict[str, Any] = {}
    if args.type is not None:
        overrides["type"] = args.type
    if args.css_ext is not None:
        overrides["css_extension"] = args.css_ext
    if args.nocss:
        overrides["css_extension"] = None
    if args.js_ext is not None:
        overrides["js_extension"] = args.js_ext
    if args.methods is not None:
        overrides["component_methods"] = [m.strip() for m in args.methods.split(",") if m.strip()]
    if args.index:
        overrides["index_file"] = True
    if args.connected:
        overrides["connected"] = True
    if args.stories:
        overrides["include_stories"] = True
    if args.notest:
        overrides["include_tests"] = False
    if args.no_mkdir:
        overrides["no_mkdir"] = True
    return overrides


def select_template_set(templates_root: Path, template_name: str | None) -> Path:
    """Return the template directory to materialize.

    A root with files at its top level is a template set on its own.  A root
    holding only directories is a collection of sets: *template_name* picks
    one, and a collection with a single set uses it directly.  Hidden
    directories are never template sets.

    Raises:
        PathUnavailableError: If *templates_root* is not a directory.
        InvalidArgumentError: If the set to use cannot be determined.
    """
    subdirectories = [
        d for d in list_subdirectories(templates_root) if not d.name.startswith(".")
    ]
    available = sorted(d.name for d in subdirectories)

    if template_name is not None:
        if template_name not in available:
            raise InvalidArgumentError(
                f"Unknown template set {template_name!r}; available: {', '.join(available) or 'none'}"
            )
        return templates_root / template_name

    has_top_level_files = any("/" not in rel for rel in iter_template_files(templates_root))
    if has_top_level_files or not subdirectories:
        return templates_root
    if len(subdirectories) == 1:
        return subdirectories[0]
    raise InvalidArgumentError(
        f"{templates_root} holds several template sets ({', '.join(available)}); "
        "choose one with --template"
    )


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


async def run(args: argparse.Namespace, config: ScaffoldConfig) -> int:
    """Generate every requested component and return the process exit code."""
    output = Path(args.output) if args.output else config.output
    templates = args.templates or config.templates_path
    exit_code = 0

    if templates:
        if args.atomic:
            print_warning("--atomic is ignored with --templates")
        template_set = select_template_set(Path(templates), args.template)
        template_config = load_config(base_path=template_set, cascading_path=template_set)
        if args.no_mkdir:
            template_config = template_config.merged({"no_mkdir": True})
        for name in args.names:
            result = await generate_files_from_template(
                name, output, template_set, config=template_config
            )
            if result.written:
                print_written_files(result.written, title=f"{name} ({template_set.absolute().name})")
            if result.success:
                print_success(f"Generated {name} in {result.output_path}")
            else:
                print_warning(f"{name}: {len(result.failed)} template file(s) failed")
                exit_code = 1
        return exit_code

    if args.template:
        print_warning("--template is ignored without --templates")

    overrides = request_overrides(args)
    for name in args.names:
        request = GenerationRequest.from_config(name, config, path=output, **overrides)
        written = await generate_files(request, config=config, atomic=args.atomic)
        print_written_files(written, title=name)
        print_success(f"Generated {name} in {request.destination}")
    return exit_code


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``component-scaffold``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        output_dir = Path(args.output) if args.output else Path.cwd()
        config = load_config(args.config, Path.cwd(), output_dir)
        config = ScaffoldConfig.from_env(config)
        exit_code = asyncio.run(run(args, config))
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    if exit_code:
        console.print("[bold red]Some files could not be generated.[/bold red]")
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
