"""
PhotoShare Backend: Settings Tests
===================================
"""

import pytest
from pydantic import ValidationError

from photoshare.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MONGODB_URL", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        s = Settings(_env_file=None)

        assert s.mongodb_url == "mongodb://127.0.0.1:27017"
        assert s.mongodb_database == "project6"
        assert s.backend_port == 3000
        assert s.static_root == "."
        assert s.expose_error_details is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MONGODB_DATABASE", "photos_test")
        monkeypatch.setenv("BACKEND_PORT", "8080")

        s = Settings(_env_file=None)

        assert s.mongodb_database == "photos_test"
        assert s.backend_port == 8080

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_port_range(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, backend_port=70000)
