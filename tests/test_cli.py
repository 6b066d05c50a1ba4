# tests/test_cli.py
"""Tests for the CLI."""

import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

pytest.importorskip("typer", reason="Tests require typer package (pip install mcqforge[cli])")

from typer.testing import CliRunner

from mcqforge import Forge, Settings
from mcqforge.cli import app
from mcqforge.config import ForgeConfig
from mcqforge.prompts import PromptConfig


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated(monkeypatch, temp_dir):
    """Run from an empty directory and restore the package logger afterwards."""
    for name in ("MCQFORGE_LLM_MODEL", "MCQFORGE_EMBEDDING_MODEL", "MCQFORGE_PROFILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(temp_dir)

    package_logger = logging.getLogger("mcqforge")
    saved = (package_logger.handlers[:], package_logger.level, package_logger.propagate)
    yield
    package_logger.handlers[:] = saved[0]
    package_logger.setLevel(saved[1])
    package_logger.propagate = saved[2]


class ProviderStub:
    def __init__(self, llm):
        self.llm = llm

    def build_llm_client(self, settings):
        return self.llm

    def build_embedder(self, settings):
        raise AssertionError("vector search is disabled")


def _forge_config(data_dir):
    return ForgeConfig(
        llm_model="test/scripted",
        embedding_model="test/embedding",
        data_dir=data_dir,
        settings=Settings(backoff_seconds=0.0),
        prompts=PromptConfig(),
    )


class TestCliBasics:
    def test_help(self, runner):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "generate" in result.output
        assert "mcqforge" in result.output

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "mcqforge" in result.output


class TestConfigCommand:
    def test_shows_settings(self, runner):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "similarity_threshold" in result.output
        assert "max_attempts" in result.output
        assert "No config file found" in result.output

    def test_reads_config_file(self, runner, temp_dir):
        path = Path(temp_dir) / "mcqforge.yaml"
        path.write_text("llm_model: openai/gpt-4o\n", encoding="utf-8")
        result = runner.invoke(app, ["config", "--config", str(path)])
        assert result.exit_code == 0
        assert "openai/gpt-4o" in result.output

    def test_invalid_settings(self, runner, temp_dir):
        path = Path(temp_dir) / "mcqforge.yaml"
        path.write_text("settings:\n  mystery: 1\n", encoding="utf-8")
        result = runner.invoke(app, ["config", "-c", str(path)])
        assert result.exit_code == 1
        assert "mystery" in result.output


class TestReadCommands:
    def test_status_without_database(self, runner, temp_dir):
        missing = os.path.join(temp_dir, "missing")
        result = runner.invoke(app, ["status", "--data-dir", missing])
        assert result.exit_code == 0
        assert "No database found" in result.output

    def test_logs_without_database(self, runner, temp_dir):
        missing = os.path.join(temp_dir, "missing")
        result = runner.invoke(app, ["logs", "-d", missing])
        assert result.exit_code == 0
        assert "No database found" in result.output

    def test_logs_empty(self, runner, temp_dir):
        result = runner.invoke(app, ["logs", "-d", temp_dir])
        assert result.exit_code == 0
        assert "No attempts logged" in result.output


class TestGenerateCommand:
    def test_missing_model_configuration(self, runner):
        result = runner.invoke(app, ["generate", "Algebra", "beginner"])
        assert result.exit_code == 1
        assert "llm_model" in result.output

    def test_generate_then_status_and_logs(
        self, runner, temp_dir, scripted_llm, candidate_text
    ):
        llm = scripted_llm(["not json at all", candidate_text()])
        data_dir = os.path.join(temp_dir, "data")

        def build(config):
            from mcqforge import LocalStorage

            return Forge(
                provider=ProviderStub(llm),
                storage=LocalStorage(config.data_dir),
                settings=config.settings,
            )

        with (
            patch("mcqforge.cli.app.get_forge_config", return_value=_forge_config(data_dir)),
            patch("mcqforge.cli.app.create_forge", side_effect=build),
        ):
            result = runner.invoke(app, ["generate", "Algebra", "beginner", "--plain"])

        assert result.exit_code == 0, result.output
        assert "What is 2+2?" in result.output
        assert "* 3. 4" in result.output
        assert "retrying" in result.output

        status = runner.invoke(app, ["status", "-d", data_dir])
        assert status.exit_code == 0
        assert "Questions" in status.output

        logs = runner.invoke(app, ["logs", "-d", data_dir, "--failed"])
        assert logs.exit_code == 0
        assert "failed" in logs.output

    def test_generation_failure_exits_nonzero(self, runner, temp_dir, scripted_llm):
        llm = scripted_llm(["{}", "{}", "{}"])
        data_dir = os.path.join(temp_dir, "data")

        def build(config):
            from mcqforge import LocalStorage

            return Forge(
                provider=ProviderStub(llm),
                storage=LocalStorage(config.data_dir),
                settings=config.settings,
            )

        with (
            patch("mcqforge.cli.app.get_forge_config", return_value=_forge_config(data_dir)),
            patch("mcqforge.cli.app.create_forge", side_effect=build),
        ):
            result = runner.invoke(app, ["generate", "Algebra", "beginner"])

        assert result.exit_code == 1
        assert "Generation failed after 3 attempt(s)" in result.output

    @pytest.mark.parametrize("extra_args", [["--plain"], []])
    def test_markup_in_generated_text_is_printed_verbatim(
        self, runner, temp_dir, scripted_llm, candidate_text, extra_args
    ):
        llm = scripted_llm(
            [
                candidate_text(
                    question="Which tag does [/x] close?",
                    options=["[b]", "[/x]"],
                    answer="[/x]",
                )
            ]
        )
        data_dir = os.path.join(temp_dir, "data")

        def build(config):
            from mcqforge import LocalStorage

            return Forge(
                provider=ProviderStub(llm),
                storage=LocalStorage(config.data_dir),
                settings=config.settings,
            )

        with (
            patch("mcqforge.cli.app.get_forge_config", return_value=_forge_config(data_dir)),
            patch("mcqforge.cli.app.create_forge", side_effect=build),
        ):
            result = runner.invoke(app, ["generate", "[red]Tags", "beginner", *extra_args])

        assert result.exit_code == 0, result.output
        assert "Which tag does [/x] close?" in result.output
        assert "[b]" in result.output
        if not extra_args:
            assert "[red]Tags" in result.output
