"""CLI integration tests for deploydoc."""

import json
import subprocess
import sys
from pathlib import Path

import pytest
from conftest import make_document
from typer.testing import CliRunner

from deploydoc.cli import app
from deploydoc.constants import (
    EXIT_CLEANUP_FAILED,
    EXIT_FAILED,
    EXIT_INVALID_DOCUMENT,
    EXIT_MISSING_ENV,
    EXIT_PRE_INSTALL_FAILED,
)


def write_document(directory: Path, blocks: list[tuple[str, str]], **kwargs: str) -> str:
    (directory / "deploy.md").write_text(make_document(blocks, **kwargs))
    return "deploy.md"


LIFECYCLE = [
    ("pre-install", "touch installed"),
    ("create-infrastructure", "mkdir infra"),
    ("run-tests", "test -d infra"),
    ("destroy-infrastructure", "rmdir infra && touch destroyed"),
]


class TestVersionAndHelp:
    """Tests for --version and --help."""

    def test_version_shows_version(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "deploydoc 0.1.0" in result.output

    def test_help_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ["init", "plan", "check", "run"]:
            assert command in result.output

    def test_global_flags_accepted(self, runner: CliRunner) -> None:
        for flags in (["-v"], ["-vv"], ["-q"], ["--json"], ["--no-color"]):
            result = runner.invoke(app, [*flags, "--help"])
            assert result.exit_code == 0


class TestPlanCommand:
    """Tests for deploydoc plan."""

    def test_plan_prints_text(
        self, runner: CliRunner, document_dir: Path, sample_document: str
    ) -> None:
        (document_dir / "deploy.md").write_text(sample_document)
        result = runner.invoke(app, ["plan", "deploy.md"])
        assert result.exit_code == 0
        assert "Steps in phase run-tests:" in result.output
        assert "deploy.md:21-23" in result.output
        assert "terraform destroy" in result.output

    def test_plan_json(
        self, runner: CliRunner, document_dir: Path, sample_document: str
    ) -> None:
        (document_dir / "deploy.md").write_text(sample_document)
        result = runner.invoke(app, ["--json", "plan", "deploy.md"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert list(data) == [
            "pre-install",
            "create-infrastructure",
            "run-tests",
            "destroy-infrastructure",
        ]
        assert data["run-tests"] == [{"line_span": [21, 23], "shell": "exit 1"}]

    def test_plan_writes_json_file(
        self, runner: CliRunner, document_dir: Path, sample_document: str
    ) -> None:
        (document_dir / "deploy.md").write_text(sample_document)
        result = runner.invoke(app, ["plan", "deploy.md", "-o", "plan.json"])
        assert result.exit_code == 0
        data = json.loads((document_dir / "plan.json").read_text())
        assert data["pre-install"][0]["shell"] == "echo hi"

    def test_plan_rejects_document_without_flag(
        self, runner: CliRunner, document_dir: Path
    ) -> None:
        name = write_document(document_dir, LIFECYCLE, front_matter="deployDoc: false\n")
        result = runner.invoke(app, ["plan", name])
        assert result.exit_code == EXIT_INVALID_DOCUMENT
        assert "deployDoc" in result.output

    def test_plan_rejects_missing_front_matter(
        self, runner: CliRunner, document_dir: Path
    ) -> None:
        (document_dir / "deploy.md").write_text("# no front matter\n")
        result = runner.invoke(app, ["plan", "deploy.md"])
        assert result.exit_code == EXIT_INVALID_DOCUMENT
        assert "metadata" in result.output

    def test_plan_missing_file(self, runner: CliRunner, document_dir: Path) -> None:
        result = runner.invoke(app, ["plan", "missing.md"])
        assert result.exit_code == EXIT_INVALID_DOCUMENT
        assert "not found" in result.output


class TestCheckCommand:
    """Tests for deploydoc check."""

    def test_check_reports_missing_environment(
        self, runner: CliRunner, document_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("DEPLOYDOC_CLI_VAR", raising=False)
        name = write_document(document_dir, [("require-env DEPLOYDOC_CLI_VAR", ""), *LIFECYCLE])
        result = runner.invoke(app, ["--json", "check", name])
        assert result.exit_code == EXIT_MISSING_ENV
        assert json.loads(result.stdout)["missing"] == ["DEPLOYDOC_CLI_VAR"]
        assert not (document_dir / "installed").exists()

    def test_check_passes_when_environment_is_set(
        self, runner: CliRunner, document_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DEPLOYDOC_CLI_VAR", "1")
        name = write_document(document_dir, [("require-env DEPLOYDOC_CLI_VAR", ""), *LIFECYCLE])
        result = runner.invoke(app, ["check", name])
        assert result.exit_code == 0
        assert "ready to run" in result.output
        assert not (document_dir / "installed").exists()


class TestRunCommand:
    """Tests for deploydoc run."""

    def test_run_success(self, runner: CliRunner, document_dir: Path) -> None:
        name = write_document(document_dir, LIFECYCLE)
        result = runner.invoke(app, ["run", name])
        assert result.exit_code == 0
        assert "succeeded" in result.output
        assert (document_dir / "destroyed").exists()
        assert not (document_dir / "infra").exists()

    def test_run_json_result(self, runner: CliRunner, document_dir: Path) -> None:
        name = write_document(document_dir, LIFECYCLE)
        result = runner.invoke(app, ["-q", "--json", "run", name])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["outcome"] == "succeeded"
        assert len(data["phases_run"]) == 4

    def test_run_test_failure_cleans_up(self, runner: CliRunner, document_dir: Path) -> None:
        blocks = [*LIFECYCLE[:2], ("run-tests", "exit 1"), LIFECYCLE[3]]
        name = write_document(document_dir, blocks)
        result = runner.invoke(app, ["run", name])
        assert result.exit_code == EXIT_FAILED
        assert "failed" in result.output
        assert (document_dir / "destroyed").exists()

    def test_run_cleanup_failure(self, runner: CliRunner, document_dir: Path) -> None:
        blocks = [*LIFECYCLE[:3], ("destroy-infrastructure", "exit 3")]
        name = write_document(document_dir, blocks)
        result = runner.invoke(app, ["run", name])
        assert result.exit_code == EXIT_CLEANUP_FAILED
        assert "clean up" in result.output

    def test_run_pre_install_failure(self, runner: CliRunner, document_dir: Path) -> None:
        blocks = [("pre-install", "exit 4"), *LIFECYCLE[1:]]
        name = write_document(document_dir, blocks)
        result = runner.invoke(app, ["run", name])
        assert result.exit_code == EXIT_PRE_INSTALL_FAILED
        assert not (document_dir / "infra").exists()
        assert not (document_dir / "destroyed").exists()

    def test_run_missing_environment_runs_nothing(
        self, runner: CliRunner, document_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("DEPLOYDOC_CLI_VAR", raising=False)
        name = write_document(document_dir, [("require-env DEPLOYDOC_CLI_VAR", ""), *LIFECYCLE])
        result = runner.invoke(app, ["run", name])
        assert result.exit_code == EXIT_MISSING_ENV
        assert "DEPLOYDOC_CLI_VAR" in result.output
        assert not (document_dir / "installed").exists()

    def test_run_dry_run_executes_nothing(self, runner: CliRunner, document_dir: Path) -> None:
        name = write_document(document_dir, LIFECYCLE)
        result = runner.invoke(app, ["run", name, "--dry-run"])
        assert result.exit_code == 0
        assert "DRY RUN" in result.output
        assert "mkdir infra" in result.output
        assert not (document_dir / "installed").exists()

    def test_run_uses_config_working_dir(self, runner: CliRunner, document_dir: Path) -> None:
        (document_dir / "work").mkdir()
        (document_dir / "deploydoc.toml").write_text('[execution]\nworking_dir = "work"\n')
        name = write_document(document_dir, LIFECYCLE)
        result = runner.invoke(app, ["run", name])
        assert result.exit_code == 0
        assert (document_dir / "work" / "destroyed").exists()


class TestInitCommand:
    """Tests for deploydoc init."""

    def test_init_writes_template(self, runner: CliRunner, document_dir: Path) -> None:
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert (document_dir / "deploydoc.toml").exists()
        assert "[execution]" in (document_dir / "deploydoc.toml").read_text()

    def test_init_keeps_existing_config(self, runner: CliRunner, document_dir: Path) -> None:
        (document_dir / "deploydoc.toml").write_text("# mine\n")
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert "already exists" in result.output
        assert (document_dir / "deploydoc.toml").read_text() == "# mine\n"


class TestConsoleScript:
    """Tests running deploydoc as a real process."""

    def test_json_run_stdout_is_only_the_result(self, tmp_path: Path) -> None:
        """Step output must not end up in front of the JSON document."""
        blocks = [*LIFECYCLE[:2], ("run-tests", "echo step-output"), LIFECYCLE[3]]
        name = write_document(tmp_path, blocks)

        completed = subprocess.run(
            [sys.executable, "-m", "deploydoc", "--json", "run", name],
            cwd=tmp_path,
            capture_output=True,
            text=True,
        )

        assert completed.returncode == 0, completed.stderr
        data = json.loads(completed.stdout)
        assert data["outcome"] == "succeeded"
        assert "step-output" in completed.stderr
        assert "\x1b[" not in completed.stderr

    def test_text_run_keeps_step_output_on_stdout(self, tmp_path: Path) -> None:
        name = write_document(tmp_path, [("run-tests", "echo step-output")])
        completed = subprocess.run(
            [sys.executable, "-m", "deploydoc", "--no-color", "run", name],
            cwd=tmp_path,
            capture_output=True,
            text=True,
        )
        assert completed.returncode == 0, completed.stderr
        assert "step-output" in completed.stdout
        assert "Deployment test succeeded" in completed.stdout
