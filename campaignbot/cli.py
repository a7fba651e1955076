from __future__ import annotations

import asyncio
import json

import typer
from pydantic import ValidationError

from campaignbot.assistant import Assistant
from campaignbot.capabilities.simple import LoggingWeapon, NullScanner, RecordingHelper, ShiftEncoder
from campaignbot.config import Settings, load_settings
from campaignbot.coordinator import Coordinator
from campaignbot.domain import NameParseError
from campaignbot.logging_setup import resolve_level, setup_logging

app = typer.Typer(help="CampaignBot - Campaign Coordinator CLI")


def _build_coordinator(settings: Settings) -> Coordinator:
    assistant = None
    if settings.ASSISTANT_ENABLED:
        assistant = Assistant(
            NullScanner(),
            consents=settings.ASSISTANT_CONSENTS,
            known_targets=settings.TARGETS,
        )
    return Coordinator(
        settings.FIRST_NAME,
        settings.LAST_NAME,
        assistant=assistant,
        shared_key=settings.SHARED_KEY,
        plan_delay_s=settings.PLAN_DELAY_S,
    )


@app.callback()
def main(
    json_logs: bool = typer.Option(False, "--json-logs", help="Enable JSON logs"),
    log_level: str | None = typer.Option(None, "--log-level", help="DEBUG|INFO|WARNING|ERROR"),
):
    try:
        settings = load_settings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="environment / .env") from exc
    try:
        level = resolve_level(log_level or settings.LOG_LEVEL)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    setup_logging(json_logs=json_logs or settings.LOG_JSON, level=level)


@app.command("name")
def parse_name(full_name: str = typer.Argument(..., help="'First Last'")):
    """Parse a name into first and last name."""
    try:
        coordinator = Coordinator.from_name(full_name)
    except NameParseError as exc:
        raise typer.BadParameter(str(exc), param_hint="FULL_NAME") from exc
    payload = {
        "first": coordinator.first_name,
        "last": coordinator.last_name,
        "full_name": coordinator.full_name,
    }
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command()
def plan():
    """Come up with a plan (takes PLAN_DELAY_S seconds)."""
    coordinator = _build_coordinator(load_settings())
    typer.echo(asyncio.run(coordinator.come_up_with_plan()))


@app.command()
def run(secret: str = typer.Option(..., "--secret", help="Message to encode and deliver")):
    """Run a full campaign with the built-in capabilities."""
    settings = load_settings()
    coordinator = _build_coordinator(settings)
    report = coordinator.run_campaign(RecordingHelper(), NullScanner(), ShiftEncoder(), secret)
    typer.echo(report.model_dump_json(indent=2))


@app.command()
def attack():
    """Fire the megaweapon."""
    coordinator = _build_coordinator(load_settings())
    weapon = LoggingWeapon()
    coordinator.perform_attack(weapon)
    typer.echo(f"{coordinator.full_name} fired {weapon.name} {weapon.shots} time(s)")
