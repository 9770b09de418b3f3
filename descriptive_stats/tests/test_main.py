"""
Command-line entry point tests
"""

import importlib
import io
import json

import pytest

from descriptive_stats import config
from descriptive_stats.exceptions import EXIT_EMPTY_INPUT
from descriptive_stats.main import build_parser, main


class TestMain:

    def setup_method(self):
        self.stdout = io.StringIO()

    def run(self, argv, stdin_text=""):
        return main(argv, stdin=io.StringIO(stdin_text), stdout=self.stdout)

    def test_json_output(self):
        code = self.run(["2", "4", "4", "4", "5", "5", "7", "9", "--precision", "2", "--json"])

        assert code == 0
        payload = json.loads(self.stdout.getvalue())
        assert payload["sum"] == 40.0
        assert payload["mean"] == 5.0
        assert payload["median"] == 4.5
        assert payload["standard_deviation"] == 2.13
        assert payload["modes"] == [4.0]

    def test_text_output(self):
        code = self.run(["1", "1", "2", "2", "3"])

        assert code == 0
        output = self.stdout.getvalue()
        assert "count: 5" in output
        assert "modes: 1.0, 2.0" in output

    def test_reads_standard_input(self):
        code = self.run(["--json", "-p", "1"], stdin_text="1.25 2.75\n3.5\n")

        assert code == 0
        payload = json.loads(self.stdout.getvalue())
        assert payload["count"] == 3
        assert payload["precision"] == 1
        assert payload["sum"] == 7.5

    def test_negative_numbers_are_positional(self):
        code = self.run(["-1.239", "-1", "--json"])

        assert code == 0
        assert json.loads(self.stdout.getvalue())["sum"] == -2.23

    def test_single_value_prints_non_finite_deviation(self):
        code = self.run(["1.239", "--json"])

        assert code == 0
        payload = json.loads(self.stdout.getvalue())
        assert payload["standard_deviation"] == float("inf")

    def test_empty_input_exit_code(self, capsys):
        code = self.run([])

        assert code == EXIT_EMPTY_INPUT
        assert "empty" in capsys.readouterr().err

    def test_empty_input_json_error(self):
        code = self.run(["--json"], stdin_text="   \n")

        assert code == EXIT_EMPTY_INPUT
        payload = json.loads(self.stdout.getvalue())
        assert payload["success"] is False
        assert payload["error"]["type"] == "EmptyInputError"

    def test_invalid_number_argument(self):
        with pytest.raises(SystemExit) as exc_info:
            self.run(["1", "two"])
        assert exc_info.value.code == 2

    def test_invalid_number_on_stdin(self):
        with pytest.raises(SystemExit) as exc_info:
            self.run([], stdin_text="1 2 three")
        assert exc_info.value.code == 2

    def test_invalid_log_level(self):
        with pytest.raises(SystemExit) as exc_info:
            self.run(["1", "--log-level", "verbose"])
        assert exc_info.value.code == 2

    def test_log_level_is_case_insensitive(self):
        assert self.run(["1", "--log-level", "info"]) == 0

    def test_negative_precision(self):
        code = self.run(["1234.5", "5678.9", "--precision", "-2", "--json"])

        assert code == 0
        assert json.loads(self.stdout.getvalue())["sum"] == pytest.approx(6900.0)

    def test_invalid_precision(self):
        with pytest.raises(SystemExit) as exc_info:
            self.run(["1", "--precision", "2.5"])
        assert exc_info.value.code == 2


class TestConfiguration:
    """Defaults read from the environment"""

    def teardown_method(self):
        importlib.reload(config)

    def reload_with(self, monkeypatch, **env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        importlib.reload(config)

    def test_default_precision_from_environment(self, monkeypatch):
        self.reload_with(monkeypatch, STATS_DEFAULT_PRECISION="4")
        assert build_parser().parse_args(["1"]).precision == 4

    def test_default_precision_without_environment(self, monkeypatch):
        monkeypatch.delenv("STATS_DEFAULT_PRECISION", raising=False)
        importlib.reload(config)
        assert build_parser().parse_args(["1"]).precision == 2

    def test_log_level_from_environment(self, monkeypatch):
        self.reload_with(monkeypatch, STATS_LOG_LEVEL="debug")
        assert build_parser().parse_args(["1"]).log_level == "DEBUG"

    def test_invalid_log_level_from_environment(self, monkeypatch):
        self.reload_with(monkeypatch, STATS_LOG_LEVEL="loud")
        with pytest.raises(SystemExit) as exc_info:
            main(["1"], stdin=io.StringIO(), stdout=io.StringIO())
        assert exc_info.value.code == 2
