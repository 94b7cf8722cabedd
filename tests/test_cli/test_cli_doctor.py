# tests/test_cli/test_cli_doctor.py
import json

from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


class TestDoctorCommand:
    def test_reports_found_settings(self, isolated_env):
        (isolated_env / "ServiceSettings.json").write_text(
            json.dumps({"Subscription": "sub-doc"}),
            encoding="utf-8",
        )

        result = runner.invoke(app, ["doctor", "run"])

        assert result.exit_code == 0, result.output
        assert "Service settings" in result.output
        assert "OK" in result.output
        assert "Note:" not in result.output

    def test_reports_missing_settings(self):
        result = runner.invoke(app, ["doctor", "run"])

        assert result.exit_code == 0, result.output
        assert "MISSING" in result.output
        assert "Note:" in result.output

    def test_reports_broken_settings(self, isolated_env):
        (isolated_env / "ServiceSettings.json").write_text("{broken", encoding="utf-8")

        result = runner.invoke(app, ["doctor", "run"])

        assert result.exit_code == 0, result.output
        assert "FAIL" in result.output

    def test_shows_language(self, monkeypatch):
        monkeypatch.setenv("CSPUB_DEFAULT_LANGUAGE", "es")

        result = runner.invoke(app, ["doctor", "run"])

        assert result.exit_code == 0, result.output
        assert "Spanish" in result.output
