"""Command-line entry point for protoscan."""

import argparse
import json
import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from .detector import DetectionResult, PrototypeDetector
from .profiles import ProfileConfigError, ProfileRegistry, load_registry

console = Console()


def read_sources(
    files: list[str],
    registry: ProfileRegistry,
    language: str | None,
) -> tuple[list[tuple[str, str, str]], dict[str, str]]:
    """Read each file and pick its profile.

    Returns ``(path, text, language)`` jobs and, for every file that could
    not be read or matched to a profile, the reason keyed by path.
    """
    jobs = []
    failures = {}

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("{task.completed}/{task.total}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Reading sources...", total=len(files))

        for name in files:
            path = Path(name)
            progress.update(task, description=f"Reading {path.name}...")

            profile = registry.get_profile(language) if language else registry.get_profile_for_file(path)
            if profile is None:
                reason = f"unknown language {language!r}" if language else f"no profile for {path.suffix or path.name!r}"
                failures[name] = reason
            else:
                try:
                    jobs.append((name, path.read_text(encoding="utf-8"), profile.name))
                except OSError as e:
                    failures[name] = str(e)

            progress.advance(task)

    return jobs, failures


def print_table(results: list[DetectionResult], failures: dict[str, str]) -> None:
    """Render detected prototypes as a table, then list the failures."""
    table = Table(title="Detected prototypes")
    table.add_column("File", overflow="fold")
    table.add_column("Language")
    table.add_column("Name", overflow="fold")
    table.add_column("Signature", overflow="fold")
    table.add_column("Annotations", overflow="fold")

    for result in results:
        prototype = result.prototype
        if prototype is None:
            continue
        table.add_row(
            escape(result.source_file or "-"),
            prototype.language,
            escape(prototype.name),
            escape(prototype.signature()),
            escape(", ".join(clause.source for clause in prototype.annotations)) or "-",
        )

    if table.row_count:
        console.print(table)

    for result in results:
        if result.error is not None:
            console.print(f"[red]✗[/red] {escape(result.source_file or '-')}: {result.error.kind}: {escape(str(result.error))}",
                          highlight=False)
    for name, reason in failures.items():
        console.print(f"[red]✗[/red] {escape(name)}: {escape(reason)}", highlight=False)


def print_json(results: list[DetectionResult], failures: dict[str, str], files: list[str]) -> None:
    """Print one JSON entry per file, in command-line order."""
    by_file = {result.source_file: result.to_dict() for result in results}
    for name, reason in failures.items():
        by_file[name] = {
            "source_file": name,
            "start": None,
            "prototype": None,
            "error": {"kind": "input_error", "message": reason},
        }
    print(json.dumps([by_file[name] for name in files if name in by_file], indent=2))


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="protoscan - detect annotated declaration prototypes in source files"
    )
    parser.add_argument(
        "files",
        nargs="+",
        metavar="FILE",
        help="Source files; each is scanned from --start",
    )
    parser.add_argument(
        "--language", "-l",
        help="Language profile to use (default: by file extension)",
    )
    parser.add_argument(
        "--config", "-c",
        help="YAML file with extra or overriding language profiles",
    )
    parser.add_argument(
        "--start",
        type=int,
        default=0,
        help="Offset where the declaration text begins",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=4,
        help="Number of detection worker threads",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        registry = load_registry(args.config)
    except ProfileConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        return 1

    jobs, failures = read_sources(args.files, registry, args.language)

    detector = PrototypeDetector(registry, max_workers=args.workers)
    results = detector.detect_many((text, language, args.start) for _, text, language in jobs)
    for (name, _, _), result in zip(jobs, results):
        result.source_file = name

    if args.json:
        print_json(results, failures, args.files)
    else:
        print_table(results, failures)

    if failures or not all(result.success for result in results):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
