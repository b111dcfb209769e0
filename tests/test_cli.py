"""CLI 테스트입니다. / CLI tests."""

from __future__ import annotations

import httpx
import respx
from typer.testing import CliRunner

import glassy.cli
from glassy.cli import Session, app, build_session
from glassy.conditions.cache import EntryStatus
from glassy.config import STORMGLASS_POINT_URL, AppConfig
from glassy.spots.catalog import SAMPLE_SPOTS

runner = CliRunner()


def _write_config(tmp_path) -> str:
    """테스트 설정을 씁니다. / Write a test config."""

    config_path = tmp_path / "glassy.yaml"
    config_path.write_text(
        "stormglass:\n  api_key: cli-key\nfavorite_spots:\n  - blackies\n",
        encoding="utf-8",
    )
    return str(config_path)


def test_build_session_shares_one_cache() -> None:
    """세션은 캐시 하나를 공유합니다. / Session wires one shared cache."""

    session = build_session(AppConfig())
    assert session.cache.client is session.client
    assert [spot.id for spot in session.spots] == [spot.id for spot in SAMPLE_SPOTS]


def test_spots_lists_favourites(tmp_path, monkeypatch) -> None:
    """즐겨찾기를 표시합니다. / Lists favourite spots."""

    monkeypatch.delenv("STORMGLASS_API_KEY", raising=False)
    result = runner.invoke(
        app, ["spots", "--favorites", "--config", _write_config(tmp_path)]
    )
    assert result.exit_code == 0
    assert "* blackies: Blackies" in result.output
    assert "san-clemente" not in result.output


def test_fetch_conditions_prints_record(tmp_path, monkeypatch, stormglass_payload) -> None:
    """단일 조회를 출력합니다. / Prints one fetched record."""

    monkeypatch.delenv("STORMGLASS_API_KEY", raising=False)
    config = _write_config(tmp_path)
    with respx.mock() as mock:
        route = mock.get(STORMGLASS_POINT_URL).respond(json=stormglass_payload())
        result = runner.invoke(app, ["fetch-conditions", "blackies", "--config", config])
    assert result.exit_code == 0, result.output
    assert route.calls.last.request.headers["authorization"] == "cli-key"
    assert "Blackies" in result.output
    assert "Rating: Epic" in result.output
    assert "Waves: 4.9 ft @ 12s" in result.output


def test_fetch_conditions_goes_through_shared_cache(tmp_path, monkeypatch) -> None:
    """단일 조회는 공유 캐시를 씁니다. / Single-spot fetch fills the shared cache."""

    monkeypatch.delenv("STORMGLASS_API_KEY", raising=False)
    sessions: list = []

    def _capture(config: AppConfig) -> Session:
        session = build_session(config)
        sessions.append(session)
        return session

    monkeypatch.setattr(glassy.cli, "build_session", _capture)
    config = _write_config(tmp_path)
    with respx.mock() as mock:
        mock.get(STORMGLASS_POINT_URL).respond(status_code=503)
        result = runner.invoke(app, ["fetch-conditions", "blackies", "--config", config])
    assert result.exit_code == 1
    assert "Blackies: Unable to load conditions" in result.output
    [session] = sessions
    entry = session.cache.get("blackies")
    assert entry.status == EntryStatus.FAILED
    assert entry.generation == 1


def test_fetch_conditions_unknown_spot(tmp_path, monkeypatch) -> None:
    """모르는 스팟은 실패합니다. / Unknown spot exits with an error."""

    monkeypatch.delenv("STORMGLASS_API_KEY", raising=False)
    result = runner.invoke(
        app, ["fetch-conditions", "pipeline", "--config", _write_config(tmp_path)]
    )
    assert result.exit_code == 2


def test_fetch_conditions_server_error(tmp_path, monkeypatch) -> None:
    """서버 오류는 일반 문구입니다. / Server errors print the generic text."""

    monkeypatch.delenv("STORMGLASS_API_KEY", raising=False)
    config = _write_config(tmp_path)
    with respx.mock() as mock:
        mock.get(STORMGLASS_POINT_URL).respond(status_code=500)
        result = runner.invoke(app, ["fetch-conditions", "blackies", "--config", config])
    assert result.exit_code == 1
    assert "Unable to load conditions" in result.output


def test_refresh_prints_table_and_report(
    tmp_path, monkeypatch, stormglass_payload
) -> None:
    """일괄 갱신 표와 리포트입니다. / Refresh prints a table and writes a report."""

    monkeypatch.delenv("STORMGLASS_API_KEY", raising=False)
    config = _write_config(tmp_path)
    failing_lat = str(SAMPLE_SPOTS[3].latitude)

    def _respond(request: httpx.Request) -> httpx.Response:
        if request.url.params["lat"] == failing_lat:
            return httpx.Response(503)
        return httpx.Response(200, json=stormglass_payload())

    report_dir = tmp_path / "reports"
    with respx.mock() as mock:
        route = mock.get(STORMGLASS_POINT_URL).mock(side_effect=_respond)
        result = runner.invoke(
            app, ["refresh", "--config", config, "--report-dir", str(report_dir)]
        )
    assert result.exit_code == 0, result.output
    assert route.call_count == len(SAMPLE_SPOTS)
    assert "| Blackies | Epic | 4.9 ft |" in result.output
    assert "| San Clemente | Unable to load conditions |" in result.output
    reports = list(report_dir.glob("conditions_*.md"))
    assert len(reports) == 1
    assert "- Spots Loaded: 3/4" in reports[0].read_text(encoding="utf-8")
