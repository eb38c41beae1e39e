"""CLI interface for phrase-search"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import click
import yaml

from phrasesearch.application.search_service import SearchService
from phrasesearch.domain.models.search_run import SearchRun
from phrasesearch.infrastructure.config.config_manager import ConfigManager, ConfigurationError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    logging.getLogger().setLevel(level)
    for logger_name in logging.Logger.manager.loggerDict:
        logging.getLogger(logger_name).setLevel(level)


def _die(message: str, verbose: bool = False, exc: Optional[Exception] = None) -> None:
    """Exit with a user-friendly error message"""
    if exc is not None:
        logger.error(message, exc_info=verbose)
    else:
        logger.error(message)
    raise click.ClickException(message)


def build_overrides(
    directories: Tuple[str, ...],
    patterns: Tuple[str, ...],
    excludes: Tuple[str, ...],
    whole_word: bool,
    case_sensitive: bool,
    file_types: Tuple[str, ...],
    exclude_dirs: Tuple[str, ...],
    output_folder: Optional[str],
    file_name: Optional[str],
) -> Dict[str, Any]:
    """Translate CLI options into config overrides

    Only options actually given on the command line are included, so config
    file values survive for everything else.

    Returns:
        Override dictionary for ConfigManager
    """
    overrides: Dict[str, Any] = {}
    if directories:
        overrides["directories"] = list(directories)
    if patterns:
        overrides["patterns"] = [
            {
                "include": phrase,
                "exclude": list(excludes),
                "whole_word": whole_word,
                "case_sensitive": case_sensitive,
            }
            for phrase in patterns
        ]

    filters: Dict[str, Any] = {}
    if file_types:
        filters["file_types"] = list(file_types)
    if exclude_dirs:
        filters["exclude_dirs"] = list(exclude_dirs)
    if filters:
        overrides["filters"] = filters

    output: Dict[str, Any] = {}
    if output_folder:
        output["folder"] = output_folder
    if file_name:
        output["file_name"] = file_name
    if output:
        overrides["output"] = output

    return overrides


def _output_search_results(run: SearchRun, print_report: bool) -> None:
    """Output search summary to console

    Args:
        run: Completed search run
        print_report: Whether to echo the full report text
    """
    if print_report:
        click.echo(run.report_text)

    click.echo("=" * 80)
    click.echo("Search Statistics")
    click.echo("=" * 80)
    for phrase, count in run.grouped.counts().items():
        click.echo(f"{phrase}: {count} files")
    click.echo(f"Files with matching lines: {run.raw_results}")
    errors = run.diagnostics.errors
    if errors:
        click.echo(f"Unreadable items: {len(errors)}", err=True)

    click.echo(f"\nSearch completed: {run.report_path}")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to .phrase-search.yml config file",
)
@click.pass_context
def cli(ctx, verbose: bool, config: Path):
    """phrase-search - find files containing phrases across directory trees"""
    ctx.ensure_object(dict)
    setup_logging(verbose)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("directories", nargs=-1, type=click.Path(file_okay=False))
@click.option("--pattern", "-p", "patterns", multiple=True, help="Phrase to search for (repeatable).")
@click.option(
    "--exclude",
    "-x",
    "excludes",
    multiple=True,
    help="Skip lines containing this phrase. Applies to every --pattern (repeatable).",
)
@click.option("--whole-word", "-w", is_flag=True, help="Match whole words only")
@click.option("--case-sensitive", "-c", is_flag=True, help="Case-sensitive matching")
@click.option(
    "--file-type",
    "-t",
    "file_types",
    multiple=True,
    help="File selector: '.js', '*.spec.js' or 'test*' (repeatable). Default: all files.",
)
@click.option(
    "--exclude-dir",
    "-d",
    "exclude_dirs",
    multiple=True,
    help="Directory selector: 'dist', '*cache' or 'build*' (repeatable). Overrides config.",
)
@click.option("--output-folder", "-o", type=str, help="Folder for the report. Overrides config.")
@click.option("--file-name", "-n", type=str, help="Report base file name. Overrides config.")
@click.option("--timestamp", type=int, help="Timestamp for the report file name (default: now, in ms)")
@click.option("--print", "print_report", is_flag=True, help="Also print the report to stdout")
@click.pass_context
def search(
    ctx,
    directories: Tuple[str, ...],
    patterns: Tuple[str, ...],
    excludes: Tuple[str, ...],
    whole_word: bool,
    case_sensitive: bool,
    file_types: Tuple[str, ...],
    exclude_dirs: Tuple[str, ...],
    output_folder: Optional[str],
    file_name: Optional[str],
    timestamp: Optional[int],
    print_report: bool,
):
    """Search directories for phrases and write a grouped report.

    DIRECTORIES: Directories to search (default: from config, else current directory)
    """
    verbose = ctx.obj.get("verbose", False)

    if not patterns:
        modifiers = [
            name
            for name, given in (
                ("--exclude", bool(excludes)),
                ("--whole-word", whole_word),
                ("--case-sensitive", case_sensitive),
            )
            if given
        ]
        if modifiers:
            raise click.UsageError(f"{', '.join(modifiers)} requires at least one --pattern")

    overrides = build_overrides(
        directories,
        patterns,
        excludes,
        whole_word,
        case_sensitive,
        file_types,
        exclude_dirs,
        output_folder,
        file_name,
    )

    try:
        config_manager = ConfigManager(config_path=ctx.obj.get("config_path"), overrides=overrides)
    except ConfigurationError as e:
        _die(str(e), verbose=verbose, exc=e)

    config = config_manager.get_search_config()
    if not config.patterns:
        raise click.UsageError("No patterns given. Use --pattern or set 'patterns' in the config file.")
    if not config.directories:
        config = config.model_copy(update={"directories": ["."]})
    if config.verbose and not verbose:
        setup_logging(verbose=True)
        verbose = True

    try:
        run = SearchService().run(config, timestamp=timestamp)
    except OSError as e:
        _die(f"Failed to write report: {e}", verbose=verbose, exc=e)
    except Exception as e:
        _die(f"Fatal error: {e}", verbose=verbose, exc=e)

    _output_search_results(run, print_report)


@cli.command("show-config")
@click.pass_context
def show_config(ctx):
    """Print the effective configuration as YAML."""
    verbose = ctx.obj.get("verbose", False)
    try:
        config_manager = ConfigManager(config_path=ctx.obj.get("config_path"))
    except ConfigurationError as e:
        _die(str(e), verbose=verbose, exc=e)

    data = config_manager.get_search_config().model_dump(mode="json")
    click.echo(yaml.safe_dump(data, sort_keys=False, allow_unicode=True))


def main():
    """Main entry point"""
    cli(obj={})


if __name__ == "__main__":
    main()
