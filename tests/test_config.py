#!/usr/bin/env python3
"""Tests for dataset path configuration."""

from pathlib import Path

from catalog.config import DATA_FILE_ENV, DEFAULT_DATA_FILE, data_file


class TestDataFile:
    """Tests for data_file resolution."""

    def test_default_is_bundled_dataset(self, monkeypatch):
        monkeypatch.delenv(DATA_FILE_ENV, raising=False)
        assert data_file() == DEFAULT_DATA_FILE
        assert DEFAULT_DATA_FILE.exists()

    def test_env_override(self, monkeypatch, tmp_path):
        target = tmp_path / "custom.json"
        monkeypatch.setenv(DATA_FILE_ENV, str(target))
        assert data_file() == Path(target)

    def test_blank_env_ignored(self, monkeypatch):
        monkeypatch.setenv(DATA_FILE_ENV, "  ")
        assert data_file() == DEFAULT_DATA_FILE
