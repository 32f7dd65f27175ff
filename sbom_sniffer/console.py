"""Rich console utilities for sbom-sniffer.

This module provides a shared Rich Console instance and helper functions
for CLI output, with GitHub Actions annotations when running in CI.
"""

import os
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from ._sniffing import SniffResult

# Detect CI environments
IS_GITHUB_ACTIONS = os.getenv("GITHUB_ACTIONS") == "true"

custom_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "highlight": "magenta",
    }
)

# Shared console instance
# Force colors ON in GitHub Actions (it supports ANSI colors but Rich may incorrectly disable them)
console = Console(
    theme=custom_theme,
    force_terminal=IS_GITHUB_ACTIONS or None,
    color_system="auto",
)


def gha_error(message: str, title: Optional[str] = None) -> None:
    """
    Emit an error that appears in GitHub Actions job summary.

    Args:
        message: Error message
        title: Optional title for the error
    """
    if IS_GITHUB_ACTIONS:
        if title:
            print(f"::error title={title}::{message}")
        else:
            print(f"::error::{message}")
    else:
        if title:
            console.print(f"[error]Error ({escape(title)}):[/error] {escape(message)}", soft_wrap=True)
        else:
            console.print(f"[error]Error:[/error] {escape(message)}", soft_wrap=True)


def print_result(result: SniffResult) -> None:
    """Print one `<file>: <format>` line, or the failure reason."""
    source = escape(result.source or "<stream>")
    if result.success:
        console.print(f"{source}: [success]{escape(result.format)}[/success]", soft_wrap=True)
    else:
        console.print(f"{source}: [error]{escape(result.error_message or 'unknown error')}[/error]", soft_wrap=True)


def print_results_table(results: List[SniffResult]) -> None:
    """
    Print a summary table of detection results.

    Args:
        results: Detection results in input order
    """
    table = Table(title="SBOM Formats", show_header=True, header_style="bold")
    table.add_column("File", style="cyan", overflow="fold")
    table.add_column("Family")
    table.add_column("Encoding")
    table.add_column("Version", justify="right")
    table.add_column("Status")

    for result in results:
        source = escape(result.source or "<stream>")
        info = result.info
        if info is not None:
            table.add_row(source, info.family or info.type, info.encoding, info.version, "[success]✓[/success]")
        else:
            table.add_row(source, "-", "-", "-", f"[error]✗ {escape(result.error_kind or '')}[/error]")

    console.print(table)


def print_final_failure(failed: int, total: int) -> None:
    """Print a closing line for a run where some files could not be identified."""
    gha_error(f"{failed} of {total} file(s) could not be identified", title="SBOM Format Detection Failed")
