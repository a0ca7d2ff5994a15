import argparse
import logging
import sys
from typing import Optional

from bundlecmd.config.settings import settings
from bundlecmd.container import container
from bundlecmd.exceptions import BaseAppError
from bundlecmd.utils.path_safety import first_violation


def _print_check_pretty(path: str, rule: Optional[str]) -> None:
    from rich.console import Console
    from rich.text import Text

    console = Console(soft_wrap=True)
    if rule:
        console.print(
            Text.assemble((path, "bold"), " is ", ("dangerous", "bold red"), f" ({rule})")
        )
    else:
        console.print(Text.assemble((path, "bold"), " is ", ("safe", "bold green")))


def _print_sections_pretty(package: str, sections: list[str]) -> None:
    from rich import box
    from rich.console import Console
    from rich.table import Table

    table = Table(title=package, box=box.ROUNDED, border_style="magenta")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Section")
    for index, name in enumerate(sections, start=1):
        table.add_row(str(index), name)
    Console(soft_wrap=True).print(table)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bundlecmd-run",
        description="Run command packages or ad-hoc commands against the sdmc root.",
    )
    parser.add_argument("package", nargs="?", help="Package file to load")
    parser.add_argument("--section", help="Package section to run")
    parser.add_argument(
        "--list", action="store_true", help="List the sections of the package"
    )
    parser.add_argument(
        "--line",
        action="append",
        default=[],
        help="Command line to run (repeatable, runs in order)",
    )
    parser.add_argument(
        "--check",
        metavar="PATH",
        help="Print whether delete/move would refuse PATH and exit",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Render results with rich formatting",
    )
    parser.add_argument(
        "--log-level", default=settings.log_level, help="Logging level (default: INFO)"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.check:
        path = container.get_path_resolver().preprocess_path(args.check)
        rule = first_violation(path)
        if args.pretty:
            _print_check_pretty(path, rule)
        elif rule:
            print(f"{path}: dangerous ({rule})")
        else:
            print(f"{path}: safe")
        return 0

    try:
        if args.line:
            commands = container.get_parse_commands_use_case().parse_lines(args.line)
            container.get_execute_commands_use_case().execute(commands)
            print(f"Executed {len(commands)} commands")
            return 0

        if not args.package:
            parser.print_usage(sys.stderr)
            print("error: a package file or --line is required", file=sys.stderr)
            return 2

        run_package = container.get_run_package_use_case()
        if args.list or not args.section:
            sections = run_package.list_sections(args.package)
            if args.pretty:
                _print_sections_pretty(args.package, sections)
            else:
                for name in sections:
                    print(name)
            return 0

        count = run_package.execute(args.package, args.section)
        print(f"Executed {count} commands from '{args.section}'")
        return 0
    except BaseAppError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
