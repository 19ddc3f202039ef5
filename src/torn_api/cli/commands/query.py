"""Query commands: one API request per invocation.

The decoded value of every requested selection is printed as JSON, keyed by
selection token. A selection's accessor is the lower-cased member name
(``UserSelection.PERSONAL_STATS`` -> ``UserResponse.personal_stats``).
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated, Any, Callable

import typer
import yaml
from pydantic import BaseModel, ValidationError

from torn_api.cli.utils.output import print_error, print_json
from torn_api.config import TornConfig
from torn_api.errors import TornClientError
from torn_api.faction import FactionSelection
from torn_api.key import KeySelection
from torn_api.request import ApiRequestBuilder, TornApi
from torn_api.selection import ApiSelection
from torn_api.user import UserSelection

logger = logging.getLogger(__name__)

SelectionOption = Annotated[
    list[str] | None,
    typer.Option(
        "--selection",
        "-s",
        help="Selection to request (repeatable, default: basic)",
    ),
]
FromOption = Annotated[
    datetime | None,
    typer.Option("--from", help="Only entries at or after this time (UTC)"),
]
ToOption = Annotated[
    datetime | None,
    typer.Option("--to", help="Only entries at or before this time (UTC)"),
]
CommentOption = Annotated[
    str | None,
    typer.Option("--comment", "-c", help="Comment recorded in the key's access log"),
]


def load_config(ctx: typer.Context) -> TornConfig:
    """Resolve configuration from the global CLI options."""
    options: dict[str, Any] = ctx.obj or {}
    config_path: Path | None = options.get("config")

    config = TornConfig.from_yaml(config_path) if config_path else TornConfig()
    config = TornConfig.from_env(config)
    return config.with_overrides(
        api_key=options.get("key"),
        backend=options.get("backend"),
    )


def parse_selections(
    selection_type: type[ApiSelection], tokens: list[str] | None, default: str
) -> list[ApiSelection]:
    """Map selection tokens onto ``selection_type`` members.

    Raises:
        typer.BadParameter: If a token is not a selection of this category.
    """
    selections = []
    for token in tokens or [default]:
        try:
            selections.append(selection_type(token))
        except ValueError:
            valid = ", ".join(s.raw_value for s in selection_type)
            raise typer.BadParameter(
                f"unknown {selection_type.category()} selection '{token}' "
                f"(choose from: {valid})",
                param_hint="--selection",
            )
    return selections


async def fetch(
    config: TornConfig,
    make_builder: Callable[[TornApi], ApiRequestBuilder],
    selections: list[ApiSelection],
    from_time: datetime | None = None,
    to_time: datetime | None = None,
    comment: str | None = None,
) -> dict[str, Any]:
    """Send one request and decode every requested selection."""
    async with config.create_client() as client:
        builder = make_builder(config.torn_api(client)).selections(selections)
        if from_time is not None:
            builder = builder.from_(from_time)
        if to_time is not None:
            builder = builder.to(to_time)
        if comment is not None:
            builder = builder.comment(comment)

        response = await builder.send()

    result: dict[str, Any] = {}
    for selection in selections:
        value = getattr(response, selection.name.lower())()
        if isinstance(value, BaseModel):
            value = value.model_dump(mode="json", by_alias=True)
        result[selection.raw_value] = value
    return result


def run_query(
    ctx: typer.Context,
    make_builder: Callable[[TornApi], ApiRequestBuilder],
    selections: list[ApiSelection],
    from_time: datetime | None = None,
    to_time: datetime | None = None,
    comment: str | None = None,
) -> None:
    """Run ``fetch`` and print its result, exiting 1 on any failure."""
    try:
        config = load_config(ctx)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        print_error(f"Failed to load configuration: {e}")
        raise typer.Exit(1)

    try:
        result = asyncio.run(
            fetch(config, make_builder, selections, from_time, to_time, comment)
        )
    except ValueError as e:
        # missing key
        print_error(str(e))
        raise typer.Exit(1)
    except TornClientError as e:
        logger.debug("Request failed", exc_info=True)
        print_error(str(e))
        raise typer.Exit(1)

    print_json(result)


def user(
    ctx: typer.Context,
    user_id: Annotated[
        int | None,
        typer.Argument(help="Player id (default: the key owner)"),
    ] = None,
    selection: SelectionOption = None,
    from_time: FromOption = None,
    to_time: ToOption = None,
    comment: CommentOption = None,
) -> None:
    """Fetch user selections.

    Examples:
        torn-api user -s basic -s discord
        torn-api user 2111649 -s profile
    """
    selections = parse_selections(UserSelection, selection, "basic")
    run_query(
        ctx, lambda api: api.user(user_id), selections, from_time, to_time, comment
    )


def faction(
    ctx: typer.Context,
    faction_id: Annotated[
        int | None,
        typer.Argument(help="Faction id (default: the key owner's faction)"),
    ] = None,
    selection: SelectionOption = None,
    from_time: FromOption = None,
    to_time: ToOption = None,
    comment: CommentOption = None,
) -> None:
    """Fetch faction selections.

    Examples:
        torn-api faction
        torn-api faction 9036 -s basic
    """
    selections = parse_selections(FactionSelection, selection, "basic")
    run_query(
        ctx, lambda api: api.faction(faction_id), selections, from_time, to_time, comment
    )


def key(
    ctx: typer.Context,
    comment: CommentOption = None,
) -> None:
    """Show the access level and permitted selections of the API key."""
    selections = parse_selections(KeySelection, None, "info")
    run_query(ctx, lambda api: api.key_info(), selections, comment=comment)
