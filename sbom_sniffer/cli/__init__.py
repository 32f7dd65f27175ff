"""CLI module for sbom-sniffer.

This module provides the `sbom-sniff` command-line interface.
It supports both CLI arguments and environment variables for configuration.
"""

from .main import (
    Config,
    build_config,
    cli,
    evaluate_boolean,
    main,
    run,
)

__all__ = [
    "cli",
    "main",
    "Config",
    "build_config",
    "run",
    "evaluate_boolean",
]
