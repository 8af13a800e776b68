"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from voice_consistency_analyzer.cli import main
from voice_consistency_analyzer.config import get_settings

SAMPLES = [
    "We build fast, friendly websites for small businesses. Our team handles everything from design to launch!",
    "Want a site that converts? We design pages your visitors love. Book a free call today.",
]


@pytest.fixture
def runner(tmp_path, monkeypatch):
    """CLI runner with an isolated data directory."""
    monkeypatch.setenv("VCA_DATA_DIR", str(tmp_path / "data"))
    get_settings.cache_clear()
    yield CliRunner()
    get_settings.cache_clear()


@pytest.fixture
def sample_files(tmp_path):
    paths = []
    for i, text in enumerate(SAMPLES, start=1):
        path = tmp_path / f"sample{i}.txt"
        path.write_text(text, encoding="utf-8")
        paths.append(str(path))
    return paths


class TestMeasure:

    def test_json_output(self, runner):
        result = runner.invoke(main, ["measure", "--json", "--text", "Hello world. Foo bar baz."])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["avg_sentence_length"] == 2.5
        assert data["sentence_count"] == 2

    def test_table_output(self, runner, sample_files):
        result = runner.invoke(main, ["measure", sample_files[0]])
        assert result.exit_code == 0
        assert "Formality" in result.output

    def test_empty_text(self, runner):
        result = runner.invoke(main, ["measure", "--text", "   "])
        assert result.exit_code == 1

    def test_no_input(self, runner):
        result = runner.invoke(main, ["measure"])
        assert result.exit_code == 1


class TestProfileCommands:

    def test_build_requires_two_samples(self, runner, sample_files):
        result = runner.invoke(main, ["profile", "build", sample_files[0]])
        assert result.exit_code == 1
        assert "at least 2 samples" in result.output

    def test_build_saves_profile(self, runner, sample_files, tmp_path):
        result = runner.invoke(main, ["profile", "build", *sample_files])
        assert result.exit_code == 0
        assert (tmp_path / "data" / "voice-profile.json").exists()
        assert json.loads((tmp_path / "data" / "samples.json").read_text()) == SAMPLES

    def test_build_no_save_with_output(self, runner, sample_files, tmp_path):
        output = tmp_path / "exported.json"
        result = runner.invoke(main, ["profile", "build", *sample_files, "--no-save", "-o", str(output)])
        assert result.exit_code == 0
        assert not (tmp_path / "data" / "voice-profile.json").exists()
        assert json.loads(output.read_text())["sample_count"] == 2

    def test_build_unsupported_file(self, runner, sample_files, tmp_path):
        bad = tmp_path / "deck.pptx"
        bad.write_bytes(b"")
        result = runner.invoke(main, ["profile", "build", sample_files[0], str(bad)])
        assert result.exit_code == 1

    def test_show_without_profile(self, runner):
        result = runner.invoke(main, ["profile", "show"])
        assert result.exit_code == 1
        assert "No voice profile found" in result.output

    def test_show_and_reset(self, runner, sample_files, tmp_path):
        runner.invoke(main, ["profile", "build", *sample_files])

        result = runner.invoke(main, ["profile", "show"])
        assert result.exit_code == 0
        assert "Your Voice Profile" in result.output

        result = runner.invoke(main, ["profile", "reset", "--yes"])
        assert result.exit_code == 0
        assert not (tmp_path / "data" / "voice-profile.json").exists()


class TestCheck:

    def test_check_requires_profile(self, runner):
        result = runner.invoke(main, ["check", "--text", "Some copy."])
        assert result.exit_code == 1

    def test_check_against_saved_profile(self, runner, sample_files, tmp_path):
        runner.invoke(main, ["profile", "build", *sample_files])
        output = tmp_path / "result.json"

        result = runner.invoke(main, ["check", sample_files[0], "-o", str(output)])
        assert result.exit_code == 0
        assert "Voice Consistency Score" in result.output

        data = json.loads(output.read_text())
        assert 0 <= data["overall_score"] <= 100
        assert [row["key"] for row in data["breakdown"]][0] == "formality"
        assert len(data["breakdown"]) == 9

    def test_check_with_profile_file(self, runner, sample_files, tmp_path):
        exported = tmp_path / "profile.json"
        runner.invoke(main, ["profile", "build", *sample_files, "--no-save", "-o", str(exported)])

        result = runner.invoke(main, ["check", "-p", str(exported), "--text", "WOW!!! AMAZING DEAL!!! BUY NOW!!!"])
        assert result.exit_code == 0
        assert "Tips:" in result.output

    def test_check_empty_text(self, runner, sample_files):
        runner.invoke(main, ["profile", "build", *sample_files])
        result = runner.invoke(main, ["check", "--text", ""])
        assert result.exit_code == 1


class TestStatus:

    def test_status_without_profile(self, runner):
        result = runner.invoke(main, ["status"])
        assert result.exit_code == 0
        assert "No voice profile saved yet" in result.output
