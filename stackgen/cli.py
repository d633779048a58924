"""stackgen command-line entry point.

Generates a MongoDB + admin UI + Go HTTP storage server project skeleton.

Usage::

    stackgen --project-path ./my-stack --template preset:simple
    python -m stackgen.cli --project-path ./my-stack --template ./main.go --http-port 9090
"""

from __future__ import annotations

import argparse
import sys

from stackgen.config import GeneratorDefaults
from stackgen.scaffolder import (
    GenerationError,
    MissingAPIKey,
    MissingRequiredField,
    ProjectMaterializer,
    TemplateRegistry,
    resolve_request,
)
from stackgen.utils import console, print_error, print_success, print_summary_table


def build_parser(defaults: GeneratorDefaults) -> argparse.ArgumentParser:
    """Build the argument parser, taking optional values from *defaults*."""
    parser = argparse.ArgumentParser(
        prog="stackgen",
        description="Generate a docker-compose project for a Go HTTP storage server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  stackgen --project-path ./my-stack --template preset:simple\n"
            "  stackgen --project-path ./my-stack --template preset:multi --http-port 9090\n"
            "  stackgen --project-path ./my-stack --template ./custom/main.go\n"
        ),
    )

    parser.add_argument(
        "--project-path", "--projectPath",
        dest="project_path",
        default="",
        help="Path to the project directory to create (mandatory)",
    )
    parser.add_argument(
        "--template",
        default="",
        help='Template to use ("preset:simple", "preset:multi" or a path to a file)',
    )
    parser.add_argument(
        "--db-port", "--mongoDBPort",
        dest="db_port",
        type=int,
        default=defaults.ports.database,
        help=f"MongoDB host port (default: {defaults.ports.database})",
    )
    parser.add_argument(
        "--http-port", "--httpPort",
        dest="http_port",
        type=int,
        default=defaults.ports.http,
        help=f"HTTP server host port (default: {defaults.ports.http})",
    )
    parser.add_argument(
        "--ui-port", "--mongoDBExpressPort",
        dest="ui_port",
        type=int,
        default=defaults.ports.admin_ui,
        help=f"Mongo Express host port (default: {defaults.ports.admin_ui})",
    )
    parser.add_argument(
        "--db-user", "--mongoDBUser",
        dest="db_user",
        default=defaults.credentials.username,
        help="MongoDB user (written verbatim to .env, must not contain newlines)",
    )
    parser.add_argument(
        "--db-password", "--mongoDBPassword",
        dest="db_password",
        default=defaults.credentials.password,
        help="MongoDB password (written verbatim to .env, must not contain newlines)",
    )
    parser.add_argument(
        "--api-key", "--defaultAPIKey",
        dest="api_key",
        default=defaults.api_key,
        help="Default server API key (written verbatim to .env, must not contain newlines)",
    )
    parser.add_argument(
        "--module-name",
        default=defaults.module_name,
        help=f"Go module name written to go.mod (default: {defaults.module_name})",
    )
    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List the built-in templates and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``stackgen`` and ``python -m stackgen.cli``."""
    try:
        defaults = GeneratorDefaults.from_env()
    except ValueError as exc:
        print_error(f"Error: invalid STACKGEN_* environment settings: {exc}")
        sys.exit(1)

    parser = build_parser(defaults)
    args = parser.parse_args(argv)

    if args.list_presets:
        for name in TemplateRegistry().list_presets():
            console.print(name, highlight=False)
        return

    try:
        if not args.api_key:
            raise MissingAPIKey()
        request = resolve_request(
            target=args.project_path,
            template=args.template,
            database_port=args.db_port,
            http_port=args.http_port,
            admin_ui_port=args.ui_port,
            username=args.db_user,
            password=args.db_password,
            api_key=args.api_key,
            module_name=args.module_name,
        )
    except MissingRequiredField as exc:
        print_error(f"Error on generation: {exc}")
        parser.print_usage(sys.stderr)
        sys.exit(1)
    except GenerationError as exc:
        print_error(f"Error on generation: {exc}")
        sys.exit(1)

    report = ProjectMaterializer().materialize(request)
    if not report.completed:
        print_error(report.describe())
        sys.exit(1)

    print_summary_table(
        {
            str(path.relative_to(request.target)): f"{path.stat().st_mode & 0o777:o}"
            for path in report.written
        },
        title=f"Project {request.target}",
    )
    print_success(report.describe())


if __name__ == "__main__":
    main()
