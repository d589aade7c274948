"""Tests for the command-line entry point.

Covers:
- Usage errors (no path, non-existent path) exit non-zero
- Delimited output by default, SQL with ``-sql`` in any case
- Unknown second tokens fall back to delimited output
- Pipeline errors exit non-zero
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from station_extract.cli import app

if TYPE_CHECKING:
    from pathlib import Path

runner = CliRunner()

EXPECTED_DELIMITED = (
    "1;Beijing West (北京西站);39.9,116.3\n"
    "2;Shanghai (上海);31.23,121.47\n"
    "3;No Name found.;23.13,113.26\n"
)

EXPECTED_SQL = (
    "INSERT INTO stations (countryCode, id, uicibnr, title, lat, lon) "
    "VALUES ('cn', '1', NULL, 'Beijing West (北京西站)', 39.9, 116.3);\n"
    "INSERT INTO stations (countryCode, id, uicibnr, title, lat, lon) "
    "VALUES ('cn', '2', NULL, 'Shanghai (上海)', 31.23, 121.47);\n"
    "INSERT INTO stations (countryCode, id, uicibnr, title, lat, lon) "
    "VALUES ('cn', '3', NULL, 'No Name found.', 23.13, 113.26);\n"
)


class TestUsage:
    def test_no_arguments(self) -> None:
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert "Run with 1 argument with the path to the .shp file." in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.shp"
        result = runner.invoke(app, [str(missing)])
        assert result.exit_code == 1
        assert "File not found" in result.output
        assert "Run with 1 argument" in result.output


class TestOutput:
    def test_delimited_by_default(self, stations_shp: Path) -> None:
        result = runner.invoke(app, [str(stations_shp)])
        assert result.exit_code == 0, result.output
        assert result.stdout == EXPECTED_DELIMITED

    @pytest.mark.parametrize("token", ["-sql", "-SQL", "-Sql"])
    def test_sql_mode(self, stations_shp: Path, token: str) -> None:
        result = runner.invoke(app, [str(stations_shp), token])
        assert result.exit_code == 0, result.output
        assert result.stdout == EXPECTED_SQL

    @pytest.mark.parametrize("token", ["-csv", "sql"])
    def test_other_token_is_delimited(self, stations_shp: Path, token: str) -> None:
        result = runner.invoke(app, [str(stations_shp), token])
        assert result.exit_code == 0, result.output
        assert result.stdout == EXPECTED_DELIMITED


class TestFailures:
    def test_unreadable_dataset(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.shp"
        path.write_bytes(b"\x00" * 16)
        result = runner.invoke(app, [str(path)])
        assert result.exit_code == 1
        assert "INSERT" not in result.output
        assert ";No Name found." not in result.output
