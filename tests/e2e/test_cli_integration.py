"""End-to-end tests for the command line interface."""
import json
import os

import pytest
import yaml

from patterns_demo.cli.main import main, parse_args


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in list(os.environ):
        if name.startswith("PATTERNS_DEMO_"):
            monkeypatch.delenv(name)


def run_cli(capsys, *argv):
    exit_code = main(list(argv))
    return exit_code, capsys.readouterr().out


class TestCLI:

    @pytest.mark.parametrize("demo", ["repository", "resource", "factory", "strategy", "action"])
    def test_demo_prints_json(self, capsys, demo):
        exit_code, out = run_cli(capsys, demo)

        assert exit_code == 0
        result = json.loads(out)
        assert "error" not in result

    def test_yaml_output(self, capsys):
        exit_code, out = run_cli(capsys, "strategy", "--format", "yaml")

        assert exit_code == 0
        assert yaml.safe_load(out)["default_strategy"] == "ship"

    def test_table_output(self, capsys):
        exit_code, out = run_cli(capsys, "strategy", "--format", "table")

        assert exit_code == 0
        assert "quotes" in out
        assert "Yokohama, JP" in out

    def test_config_file(self, capsys, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({
            "storage": {"type": "json", "json_path": str(tmp_path / "orders.json")},
        }))

        exit_code, out = run_cli(capsys, "repository", "--config", str(config))

        assert exit_code == 0
        assert json.loads(out)["fulfilled"] == [1]
        assert (tmp_path / "orders.json").exists()

    def test_missing_config_file(self, capsys, tmp_path):
        exit_code, out = run_cli(capsys, "repository", "--config", str(tmp_path / "absent.json"))

        assert exit_code == 1
        assert json.loads(out)["error"] == "CONFIGURATION_ERROR"

    def test_unknown_demo_rejected(self, capsys):
        with pytest.raises(SystemExit):
            parse_args(["observer"])

    def test_log_level_flag(self):
        args = parse_args(["action", "--log-level", "DEBUG"])

        assert args.demo == "action"
        assert args.log_level == "DEBUG"
        assert args.format == "json"
