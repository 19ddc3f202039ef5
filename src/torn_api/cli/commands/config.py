"""Config subcommands for configuration management."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import ValidationError
from rich.syntax import Syntax

from torn_api.cli.utils.output import console, print_error, print_success, print_warning
from torn_api.config import TornConfig

app = typer.Typer(no_args_is_help=True)


@app.command("validate")
def validate(
    config_path: Annotated[
        Path,
        typer.Argument(
            help="Path to configuration file to validate",
            exists=True,
            dir_okay=False,
        ),
    ],
) -> None:
    """Validate a configuration file.

    Examples:
        torn-api config validate torn.yaml
    """
    # First, check if it's valid YAML
    try:
        with open(config_path) as f:
            raw_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        print_error(f"Invalid YAML syntax: {e}")
        raise typer.Exit(1)

    if raw_data is None:
        print_error("Configuration file is empty")
        raise typer.Exit(1)

    if not isinstance(raw_data, dict):
        print_error("Configuration must be a YAML mapping (dictionary)")
        raise typer.Exit(1)

    try:
        config = TornConfig.model_validate(raw_data)
    except ValidationError as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)

    warnings: list[str] = []
    if not config.api_key:
        warnings.append("api_key is not set - requests need TORN_API_KEY or --key")
    if not config.base_url.startswith("https://"):
        warnings.append(
            f"base_url ({config.base_url}) is not https - the key is sent in the query string"
        )

    print_success(f"Configuration is valid: {config_path}")

    if warnings:
        console.print()
        for warning in warnings:
            print_warning(warning)


@app.command("generate")
def generate(
    output: Annotated[
        Path,
        typer.Argument(help="Output file path"),
    ],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Generate a configuration file with default values.

    Examples:
        torn-api config generate torn.yaml
    """
    if output.exists() and not force:
        print_error(f"File already exists: {output}")
        console.print("Use --force to overwrite")
        raise typer.Exit(1)

    output.parent.mkdir(parents=True, exist_ok=True)
    TornConfig().to_yaml(output)

    print_success(f"Generated configuration: {output}")


@app.command("show")
def show(
    config_path: Annotated[
        Path,
        typer.Argument(
            help="Path to configuration file",
            exists=True,
            dir_okay=False,
        ),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format (yaml, json)"),
    ] = "yaml",
) -> None:
    """Display a configuration file with syntax highlighting.

    The API key is masked.

    Examples:
        torn-api config show torn.yaml --format json
    """
    try:
        config = TornConfig.from_yaml(config_path)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        print_error(f"Failed to load configuration: {e}")
        raise typer.Exit(1)

    data = config.model_dump()
    if data["api_key"]:
        data["api_key"] = "***"

    if output_format == "json":
        syntax = Syntax(json.dumps(data, indent=2), "json", theme="monokai")
    else:
        output = yaml.dump(data, default_flow_style=False, sort_keys=False)
        syntax = Syntax(output, "yaml", theme="monokai")

    console.print(syntax)
