"""CLI entrypoints for esbridge commands."""

from __future__ import annotations

import argparse
import subprocess
import sys
from dataclasses import replace
from pathlib import Path

from .config import ConfigError, EsBridgeConfig, load_config
from .declarations import DeclarationCompiler, DeclarationExportError
from .docdata import DocumentationError, filter_classes, load_documentation
from .logging import configure_logging, get_logger
from .modules import ModuleResolver
from .scripting import (
    ExternalEditorError,
    ScriptTemplateRenderer,
    editor_command,
    find_typescript_source,
)


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .esbridge.yml or the directory holding it (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="esbridge",
        description="Editor tooling for the ECMAScript bridge: declarations, module paths and script templates.",
    )
    _add_verbose_option(parser)
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    declare_parser = subparsers.add_parser(
        "declare",
        help="Generate a TypeScript declaration file from class documentation.",
    )
    _add_verbose_option(declare_parser, suppress_default=True)
    _add_config_option(declare_parser)
    declare_parser.add_argument(
        "docs",
        help="Class reference directory, XML file or JSON documentation dump.",
    )
    declare_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Destination .d.ts file (defaults to the configured output or godot.d.ts).",
    )
    declare_parser.add_argument(
        "--namespace",
        default=None,
        help="Name of the declared module (defaults to 'godot').",
    )

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Resolve a relative module specifier against a directory.",
    )
    _add_verbose_option(resolve_parser, suppress_default=True)
    resolve_parser.add_argument("specifier", help="Specifier as written in the import statement.")
    resolve_parser.add_argument("base_dir", help="Directory of the importing script.")

    script_parser = subparsers.add_parser(
        "new-script",
        help="Print or write a new class script extending a host class.",
    )
    _add_verbose_option(script_parser, suppress_default=True)
    _add_config_option(script_parser)
    script_parser.add_argument("class_name")
    script_parser.add_argument("base_class_name")
    script_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the script here instead of printing it.",
    )

    classes_parser = subparsers.add_parser(
        "classes",
        help="List documented classes, optionally filtered.",
    )
    _add_verbose_option(classes_parser, suppress_default=True)
    classes_parser.add_argument("docs")
    classes_parser.add_argument(
        "--filter",
        default="",
        help="Keep classes whose name or base class contains these characters in order.",
    )

    source_parser = subparsers.add_parser(
        "locate-source",
        help="Find the TypeScript source a compiled .jsx class was built from.",
    )
    _add_verbose_option(source_parser, suppress_default=True)
    source_parser.add_argument("script", help="Compiled script path, e.g. res://dist/player.jsx.")
    source_parser.add_argument(
        "--project",
        type=Path,
        default=Path("."),
        help="Project root holding tsconfig.json (defaults to current directory).",
    )

    edit_parser = subparsers.add_parser(
        "edit",
        help="Open the TypeScript source of a compiled class script in the external editor.",
    )
    _add_verbose_option(edit_parser, suppress_default=True)
    _add_config_option(edit_parser)
    edit_parser.add_argument("script", help="Compiled script path, e.g. res://dist/player.jsx.")
    edit_parser.add_argument(
        "--project",
        type=Path,
        default=Path("."),
        help="Project root holding tsconfig.json (defaults to current directory).",
    )
    edit_parser.add_argument("--line", type=int, default=0)
    edit_parser.add_argument("--col", type=int, default=0)
    edit_parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Print the editor command instead of launching it.",
    )

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP service.")
    _add_verbose_option(serve_parser, suppress_default=True)
    _add_config_option(serve_parser)
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for esbridge commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    try:
        if args.command == "declare":
            config = _load_config(args.config)
            settings = config.declarations.to_settings()
            if args.namespace:
                settings = replace(settings, namespace=args.namespace)
            model = load_documentation(args.docs)
            output = args.output or config.declaration_output
            path = DeclarationCompiler(settings).export(model, output)
            print(f"Declarations written to {_relativize(path)}")
        elif args.command == "resolve":
            print(ModuleResolver().resolve_in(args.specifier, args.base_dir))
        elif args.command == "new-script":
            config = _load_config(args.config)
            renderer = ScriptTemplateRenderer(
                config.scripts.templates_dir,
                object_namespace=config.scripts.object_namespace,
            )
            source = renderer.render(args.class_name, args.base_class_name)
            if args.output is None:
                sys.stdout.write(source)
            else:
                args.output.write_text(source, encoding="utf-8")
                print(f"Script created at {_relativize(args.output)}")
        elif args.command == "classes":
            model = load_documentation(args.docs)
            for class_doc in filter_classes(model, args.filter):
                base = f" ({class_doc.inherits})" if class_doc.inherits else ""
                print(f"{class_doc.name}{base}")
        elif args.command == "locate-source":
            print(find_typescript_source(args.script, args.project.resolve()))
        elif args.command == "edit":
            config = _load_config(args.config)
            command = editor_command(
                args.script,
                args.project.resolve(),
                config.editor.exec_path,
                config.editor.exec_flags,
                line=args.line,
                column=args.col,
            )
            if args.print_only:
                for part in command:
                    print(part)
            else:
                logger.info("Launching %s", command[0])
                subprocess.Popen(command)
        elif args.command == "serve":  # pragma: no cover - integration path
            from .service import run_service

            run_service(args.host, args.port, _load_config(args.config))
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except (ConfigError, DocumentationError, ExternalEditorError) as exc:
        parser.exit(1, f"{exc}\n")
    except DeclarationExportError as exc:
        logger.debug("Export failed", exc_info=True)
        parser.exit(1, f"esbridge declare failed: {exc}\nRun with --verbose for more details.\n")
    except OSError as exc:
        parser.exit(1, f"esbridge {args.command} failed: {exc}\n")


def _load_config(path: str) -> EsBridgeConfig:
    return load_config(Path(path))


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
