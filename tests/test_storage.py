"""Tests for sample loading and profile storage."""

import json

import pytest

from voice_consistency_analyzer.ingest import load_sample
from voice_consistency_analyzer.storage import ProfileStore, load_profile_file
from voice_consistency_analyzer.voice import build_profile

SAMPLES = [
    "We make scheduling simple. Your team gets more done with less effort.",
    "Our planner is fast and free to try. Why not start today?",
]


class TestLoadSample:
    """Test loading samples from files."""

    def test_text_file(self, tmp_path):
        path = tmp_path / "sample.txt"
        path.write_text(SAMPLES[0], encoding="utf-8")
        assert load_sample(path) == SAMPLES[0]

    def test_markdown_file(self, tmp_path):
        path = tmp_path / "sample.md"
        path.write_text("**Fast** setup.", encoding="utf-8")
        assert load_sample(path) == "**Fast** setup."

    def test_latin1_fallback(self, tmp_path):
        path = tmp_path / "sample.txt"
        path.write_bytes("Caf\xe9 copy.".encode("latin-1"))
        assert load_sample(path) == "Caf\xe9 copy."

    def test_html_visible_text_only(self, tmp_path):
        path = tmp_path / "landing.html"
        path.write_text(
            "<html><head><style>p {color: red}</style><script>var x = 1;</script></head>"
            "<body><h1>Save time</h1><p>Try it free.</p></body></html>",
            encoding="utf-8",
        )
        assert load_sample(path) == "Save time\nTry it free."

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "sample.pdf"
        path.write_bytes(b"%PDF")
        with pytest.raises(ValueError, match="Unsupported file format"):
            load_sample(path)


class TestProfileStore:
    """Test profile persistence."""

    @pytest.fixture
    def store(self, tmp_path):
        return ProfileStore(tmp_path / "data" / "profile.json", tmp_path / "data" / "samples.json")

    def test_missing(self, store):
        assert not store.exists()
        assert store.load_profile() is None
        assert store.load_samples() is None

    def test_save_and_load(self, store):
        profile = build_profile(SAMPLES)
        store.save(profile, SAMPLES + [""])

        assert store.exists()
        assert store.load_profile() == profile
        assert store.load_samples() == SAMPLES + [""]

    def test_malformed_profile_ignored(self, store):
        store.profile_path.parent.mkdir(parents=True)
        store.profile_path.write_text("{not json", encoding="utf-8")
        assert store.load_profile() is None

    def test_wrong_shape_ignored(self, store):
        store.profile_path.parent.mkdir(parents=True)
        store.profile_path.write_text(json.dumps({"formality": 50}), encoding="utf-8")
        assert store.load_profile() is None

    def test_clear(self, store):
        store.save(build_profile(SAMPLES), SAMPLES)
        store.clear()
        assert not store.profile_path.exists()
        assert not store.samples_path.exists()

    def test_clear_when_empty(self, store):
        store.clear()
        assert not store.exists()


class TestLoadProfileFile:

    def test_valid(self, tmp_path):
        profile = build_profile(SAMPLES)
        path = tmp_path / "profile.json"
        path.write_text(profile.to_json(), encoding="utf-8")
        assert load_profile_file(path) == profile

    def test_invalid(self, tmp_path):
        path = tmp_path / "profile.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ValueError, match="Not a valid voice profile"):
            load_profile_file(path)
