"""운영자용 CLI입니다. / Operator-facing CLI."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Mapping, Optional

import typer

from .conditions.cache import CacheEntry, ConditionsCache, EntryStatus
from .conditions.client import ConditionsClient
from .conditions.models import ConditionsRecord
from .config import AppConfig, load_app_config
from .reporting.markdown import build_report, entry_status_text, format_table
from .spots.catalog import Location, favorite_spots, find_spot, mark_favorites

app = typer.Typer(help="Glassy surf conditions CLI")


@dataclass
class Session:
    """세션 공유 객체입니다. / Objects shared across one session."""

    config: AppConfig
    spots: List[Location]
    client: ConditionsClient
    cache: ConditionsCache


def setup_logging(level: str) -> None:
    """로깅을 구성합니다. / Configure logging."""

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def build_session(config: AppConfig) -> Session:
    """세션을 생성합니다. / Build the session with one shared cache."""

    client = ConditionsClient(config.stormglass)
    return Session(
        config=config,
        spots=mark_favorites(config.favorite_spots),
        client=client,
        cache=ConditionsCache(client),
    )


def _load_session(config_path: Optional[Path]) -> Session:
    """설정을 읽어 세션을 만듭니다. / Load config and build session."""

    try:
        config = load_app_config(config_path)
        session = build_session(config)
    except (OSError, KeyError, ValueError) as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    setup_logging(config.log_level)
    return session


def _select_spots(session: Session, favorites: bool) -> List[Location]:
    """대상 스팟을 고릅니다. / Select target spots."""

    return favorite_spots(session.spots) if favorites else list(session.spots)


def _print_table(
    locations: List[Location], entries: Mapping[str, CacheEntry]
) -> None:
    """컨디션 표를 출력합니다. / Print conditions table."""

    typer.echo("\n".join(format_table(locations, entries)))


def _print_record(location: Location, record: ConditionsRecord) -> None:
    """단일 레코드를 출력합니다. / Print a single record."""

    lines = [
        f"{location.name} ({location.latitude:.4f}, {location.longitude:.4f})",
        f"Rating: {record.rating}",
        f"Waves: {record.wave_height_formatted} @ {record.wave_period_formatted}",
        f"Swell Direction: {record.wave_direction_formatted}",
        (
            f"Wind: {record.wind_speed_formatted} "
            f"{record.wind_direction_compass}"
            f"{' (offshore)' if record.is_offshore else ''}"
        ),
        f"Water: {record.water_temp_formatted}",
    ]
    typer.echo("\n".join(lines))


CONFIG_OPTION = typer.Option(None, "--config", help="YAML config file")
FAVORITES_OPTION = typer.Option(False, "--favorites", help="Favourite spots only")


@app.command("spots")
def list_spots(
    favorites: bool = FAVORITES_OPTION,
    config_path: Optional[Path] = CONFIG_OPTION,
) -> None:
    """스팟 목록을 출력합니다. / List catalog spots."""

    session = _load_session(config_path)
    for spot in _select_spots(session, favorites):
        marker = "*" if spot.is_favorite else " "
        typer.echo(
            f"{marker} {spot.id}: {spot.name} "
            f"({spot.latitude:.4f}, {spot.longitude:.4f})"
        )


@app.command("fetch-conditions")
def fetch_conditions(
    spot_id: str,
    config_path: Optional[Path] = CONFIG_OPTION,
) -> None:
    """스팟 컨디션을 조회합니다. / Fetch conditions for one spot."""

    session = _load_session(config_path)
    try:
        spot = find_spot(spot_id, session.spots)
    except KeyError as exc:
        typer.echo(str(exc.args[0]), err=True)
        raise typer.Exit(code=2) from exc

    async def _run() -> CacheEntry:
        await session.cache.refresh_one(spot)
        return session.cache.get(spot.id)

    entry = asyncio.run(_run())
    if entry.status != EntryStatus.RESOLVED or entry.record is None:
        typer.echo(f"{spot.name}: {entry_status_text(entry)}", err=True)
        raise typer.Exit(code=1)
    _print_record(spot, entry.record)


@app.command("refresh")
def refresh(
    favorites: bool = FAVORITES_OPTION,
    report_dir: Optional[Path] = typer.Option(
        None, "--report-dir", help="Write a markdown report to this directory"
    ),
    config_path: Optional[Path] = CONFIG_OPTION,
) -> None:
    """모든 스팟을 갱신합니다. / Refresh every spot and print results."""

    session = _load_session(config_path)
    spots = _select_spots(session, favorites)

    async def _run() -> Mapping[str, CacheEntry]:
        session.cache.refresh_all(spots)
        await session.cache.wait_for_refresh()
        return session.cache.entries(spots)

    entries = asyncio.run(_run())
    _print_table(spots, entries)
    if report_dir is not None:
        generated_at = datetime.now(timezone.utc).replace(microsecond=0)
        report = build_report(spots, entries, generated_at, report_dir)
        typer.echo(f"\nReport saved to {report.path}")


def main() -> None:
    """CLI 엔트리 포인트입니다. / CLI entry point."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI guard
    main()
