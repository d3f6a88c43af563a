import tempfile
from pathlib import Path

import pytest

from dualsubs.config import DEFAULT_BATCH_SIZE, DualSubsConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "DUALSUBS_ACCESS_TOKEN",
        "DUALSUBS_OUTPUT_DIR",
        "DUALSUBS_BATCH_SIZE",
        "DUALSUBS_CONCURRENCY",
        "DUALSUBS_TRANSLATE_URL",
        "DUALSUBS_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def video(tmp_path):
    path = tmp_path / "in" / "movie.mp4"
    path.parent.mkdir()
    path.write_bytes(b"\x00")
    return path


def test_derived_paths(video, tmp_path):
    out = tmp_path / "out"
    config = DualSubsConfig.from_paths(video, "no", "en", access_token="tok", output_dir=out)
    assert config.input_path == video.resolve()
    assert config.source_srt_path == out.resolve() / "movie.no.srt"
    assert config.translated_srt_path == out.resolve() / "movie.en.srt"
    assert config.combined_srt_path == out.resolve() / "movie.no-en.srt"
    assert config.output_video_path == out.resolve() / "movie.mp4"
    assert config.batch_size == DEFAULT_BATCH_SIZE
    assert config.concurrency == 1


def test_default_output_dir_is_temp(video):
    config = DualSubsConfig.from_paths(video, "no", "en", access_token="tok")
    assert config.output_dir == Path(tempfile.gettempdir()).resolve()


def test_output_video_does_not_overwrite_input(video):
    config = DualSubsConfig.from_paths(video, "no", "en", access_token="tok", output_dir=video.parent)
    assert config.output_video_path == video.parent.resolve() / "movie.en.mp4"


def test_env_fallbacks(monkeypatch, video, tmp_path):
    monkeypatch.setenv("DUALSUBS_ACCESS_TOKEN", "env-token")
    monkeypatch.setenv("DUALSUBS_OUTPUT_DIR", str(tmp_path / "env-out"))
    monkeypatch.setenv("DUALSUBS_BATCH_SIZE", "16")
    monkeypatch.setenv("DUALSUBS_CONCURRENCY", "4")
    monkeypatch.setenv("DUALSUBS_TIMEOUT", "5")
    config = DualSubsConfig.from_paths(video, "no", "en")
    assert config.access_token == "env-token"
    assert config.output_dir == (tmp_path / "env-out").resolve()
    assert config.batch_size == 16
    assert config.concurrency == 4
    assert config.timeout == 5.0


def test_invalid_env_batch_size_falls_back(monkeypatch, video):
    monkeypatch.setenv("DUALSUBS_BATCH_SIZE", "lots")
    config = DualSubsConfig.from_paths(video, "no", "en", access_token="tok")
    assert config.batch_size == DEFAULT_BATCH_SIZE


def test_invalid_explicit_batch_size(video):
    with pytest.raises(ValueError):
        DualSubsConfig.from_paths(video, "no", "en", access_token="tok", batch_size=0)


def test_missing_token(video):
    with pytest.raises(ValueError):
        DualSubsConfig.from_paths(video, "no", "en")


def test_missing_extension(tmp_path):
    path = tmp_path / "movie"
    path.write_bytes(b"\x00")
    with pytest.raises(ValueError):
        DualSubsConfig.from_paths(path, "no", "en", access_token="tok")


def test_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        DualSubsConfig.from_paths(tmp_path / "nope.mp4", "no", "en", access_token="tok")
