"""마크다운 리포트 빌더입니다. / Markdown report builder."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List, Mapping, Sequence

from ..base import GlassyBaseModel
from ..conditions.cache import ABSENT_ENTRY, CacheEntry, EntryStatus
from ..spots.catalog import Location

LOADING_TEXT = "Loading..."
UNAVAILABLE_TEXT = "Unable to load conditions"
TABLE_HEADER = "| Spot | Rating | Waves | Period | Wind | Water | Swell Dir |"
TABLE_RULE = "|------|--------|-------|--------|------|-------|-----------|"


class MarkdownReport(GlassyBaseModel):
    """마크다운 리포트 데이터입니다. / Markdown report data."""

    content: str
    path: Path


def entry_status_text(entry: CacheEntry) -> str:
    """미해결 엔트리 문구입니다. / Text for an unresolved entry.

    Error kinds are not distinguished.
    """

    if entry.status == EntryStatus.FAILED:
        return UNAVAILABLE_TEXT
    return LOADING_TEXT


def format_row(location: Location, entry: CacheEntry) -> str:
    """스팟 한 줄을 만듭니다. / Build one spot row."""

    record = entry.record
    if entry.status != EntryStatus.RESOLVED or record is None:
        status = entry_status_text(entry)
        return f"| {location.name} | {status} | - | - | - | - | - |"
    wind = f"{record.wind_speed_formatted} {record.wind_direction_compass}"
    if record.is_offshore:
        wind += " (offshore)"
    return (
        f"| {location.name} | {record.rating} | {record.wave_height_formatted} | "
        f"{record.wave_period_formatted} | {wind} | "
        f"{record.water_temp_formatted} | {record.wave_direction_formatted} |"
    )


def format_table(
    locations: Sequence[Location], entries: Mapping[str, CacheEntry]
) -> List[str]:
    """컨디션 표를 만듭니다. / Build the conditions table."""

    lines = [TABLE_HEADER, TABLE_RULE]
    for location in locations:
        lines.append(format_row(location, entries.get(location.id, ABSENT_ENTRY)))
    return lines


def format_markdown(
    locations: Sequence[Location],
    entries: Mapping[str, CacheEntry],
    generated_at: datetime,
) -> str:
    """마크다운 문자열을 만듭니다. / Build markdown string."""

    resolved = sum(
        1
        for location in locations
        if entries.get(location.id, ABSENT_ENTRY).status == EntryStatus.RESOLVED
    )
    lines = [
        "# Surf Conditions Report",
        "",
        f"- Generated: {generated_at.isoformat()}",
        f"- Spots Loaded: {resolved}/{len(locations)}",
        "",
        "## Conditions",
        *format_table(locations, entries),
        "",
        "## Spots",
    ]
    for location in locations:
        lines.append(
            f"- **{location.name}** ({location.latitude:.4f}, "
            f"{location.longitude:.4f}): {location.description}"
        )
    return "\n".join(lines).strip() + "\n"


def build_report(
    locations: Sequence[Location],
    entries: Mapping[str, CacheEntry],
    generated_at: datetime,
    directory: Path,
) -> MarkdownReport:
    """리포트를 생성합니다. / Build markdown report file."""

    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"conditions_{generated_at:%Y%m%dT%H%M}.md"
    content = format_markdown(locations, entries, generated_at)
    path.write_text(content, encoding="utf-8")
    return MarkdownReport(content=content, path=path)
