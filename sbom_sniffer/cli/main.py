import json
import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import click

from .. import __version__
from ..console import console, print_final_failure, print_result, print_results_table
from ..exceptions import ConfigurationError
from ..formats import parse_format
from ..logging_config import logger, set_log_level
from ..sniffer import Sniffer, SniffResult

SNIFFER_VERSION = __version__

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@dataclass
class Config:
    """Configuration for a `sbom-sniff` run."""

    files: List[str] = field(default_factory=list)
    json_output: bool = False
    table: bool = False
    log_level: str = "WARNING"

    def validate(self) -> None:
        """
        Validate configuration settings.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not self.files:
            raise ConfigurationError("Please provide at least one SBOM file")
        if self.json_output and self.table:
            raise ConfigurationError("Please provide only one of: --json or --table")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {self.log_level}. Expected one of: {', '.join(LOG_LEVELS)}")


def evaluate_boolean(value: str) -> bool:
    """
    Evaluate string values as boolean.

    Args:
        value: String value to evaluate

    Returns:
        Boolean result
    """
    return value.lower() in ["true", "yes", "yeah", "1"]


def build_config(
    files: Sequence[str],
    json_output: Optional[bool] = None,
    table: bool = False,
    log_level: str = "WARNING",
) -> Config:
    """
    Build a Config from CLI arguments, falling back to environment variables.

    Args:
        files: SBOM files to inspect
        json_output: Emit JSON; None means use SNIFF_JSON_OUTPUT
        table: Print a summary table
        log_level: Logging level name

    Returns:
        Config (not yet validated)
    """
    if json_output is None:
        json_output = evaluate_boolean(os.getenv("SNIFF_JSON_OUTPUT", "false"))

    return Config(
        files=list(files),
        json_output=json_output,
        table=table,
        log_level=log_level.upper(),
    )


def _result_to_dict(result: SniffResult) -> dict:
    entry = {
        "file": result.source,
        "format": result.format or None,
        "family": None,
        "encoding": None,
        "version": None,
        "error": result.error_message,
    }
    if result.success:
        info = parse_format(result.format)
        entry.update(family=info.family, encoding=info.encoding, version=info.version)
    return entry


def run(config: Config, sniffer: Optional[Sniffer] = None) -> List[SniffResult]:
    """
    Detect the format of every configured file and print the results.

    Args:
        config: Validated configuration
        sniffer: Sniffer to use (default: built-in matchers)

    Returns:
        Detection results in input order
    """
    sniffer = sniffer or Sniffer()
    results = []
    for path in config.files:
        result = sniffer.detect_file(path)
        if not result.success:
            logger.debug(f"Could not identify {path}: {result.error_message}")
        results.append(result)

    if config.json_output:
        click.echo(json.dumps([_result_to_dict(r) for r in results], indent=2))
    elif config.table:
        print_results_table(results)
    else:
        for result in results:
            print_result(result)

    return results


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False))
@click.option(
    "--json/--no-json",
    "json_output",
    default=None,
    help="Print results as a JSON array. [env: SNIFF_JSON_OUTPUT]",
)
@click.option("--table", is_flag=True, default=False, help="Print results as a summary table.")
@click.option(
    "--log-level",
    envvar="LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging verbosity. [env: LOG_LEVEL]",
)
@click.version_option(SNIFFER_VERSION, "--version", prog_name="sbom-sniff", message="%(prog)s %(version)s")
def cli(files: Sequence[str], json_output: Optional[bool], table: bool, log_level: str) -> None:
    """Detect the format and spec version of SBOM files.

    Recognizes CycloneDX JSON and SPDX JSON or tag/value documents and prints
    one format identifier per file, for example
    application/vnd.cyclonedx+json;version=1.5.
    """
    config = build_config(files, json_output=json_output, table=table, log_level=log_level)
    try:
        config.validate()
    except ConfigurationError as e:
        console.print(f"[error]Configuration error:[/error] {e}", soft_wrap=True)
        sys.exit(1)

    set_log_level(config.log_level)

    results = run(config)
    failed = sum(1 for r in results if not r.success)
    if failed:
        if not config.json_output:
            print_final_failure(failed, len(results))
        sys.exit(1)


def main() -> None:
    """Entry point for the `sbom-sniff` console script."""
    cli()


if __name__ == "__main__":
    main()
