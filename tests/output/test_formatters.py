"""Tests for the format_result dispatcher and OutputSettings."""

import json

from base95.output.formatters import OutputSettings, format_result
from base95.services.result import ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_json_mode(self) -> None:
        output = format_result(_ok("mid", key="O"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["key"] == "O"

    def test_json_output_shorthand(self) -> None:
        data = json.loads(format_result(_ok("mid", key="O"), json_output=True))
        assert data["op"] == "mid"

    def test_settings_win_over_shorthand(self) -> None:
        output = format_result(_ok("mid", key="O"), settings=OutputSettings(), json_output=True)
        assert output.startswith("OK")

    def test_json_beats_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok("mid", key="O"), settings=settings))["ok"]

    def test_quiet_mode(self) -> None:
        output = format_result(_ok("mid", key="O"), settings=OutputSettings(quiet=True))
        assert output == "O"

    def test_human_mode(self) -> None:
        output = format_result(_ok("mid", key="O", digits=[47]))
        assert "OK" in output
        assert "'O'" in output
        assert "[47]" in output
