"""
Tests for settings and backend resolution
"""
from core.config import Settings
from domain.enums.backend import Backend

ENV_NAMES = list(Settings.model_fields)


class TestSettings:
    """Tests for Settings.from_env"""

    def test_defaults(self, monkeypatch):
        for name in ENV_NAMES:
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()

        assert settings.CLOUDINARY_FOLDER == "imagebed"
        assert settings.MAX_BATCH_SIZE == 10
        assert settings.UPLOAD_TIMEOUT == 30
        assert not settings.cloudinary_configured
        assert not settings.imgbb_configured

    def test_reads_environment(self, monkeypatch):
        for name in ENV_NAMES:
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("CLOUDINARY_CLOUD_NAME", "demo")
        monkeypatch.setenv("CLOUDINARY_API_KEY", "key")
        monkeypatch.setenv("CLOUDINARY_API_SECRET", "secret")
        monkeypatch.setenv("MAX_BATCH_SIZE", "5")

        settings = Settings.from_env()

        assert settings.cloudinary_configured
        assert settings.MAX_BATCH_SIZE == 5

    def test_empty_value_counts_as_absent(self, monkeypatch):
        for name in ENV_NAMES:
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("IMGBB_API_KEY", "")

        assert Settings.from_env().IMGBB_API_KEY is None


class TestBackend:
    """Tests for Backend.resolve"""

    def test_default(self):
        assert Backend.resolve(None) is Backend.CLOUDINARY
        assert Backend.resolve("") is Backend.CLOUDINARY

    def test_known_names(self):
        assert Backend.resolve("imgbb") is Backend.IMGBB
        assert Backend.resolve("ImgBB") is Backend.IMGBB
        assert Backend.resolve("cloudinary") is Backend.CLOUDINARY

    def test_unknown_name_falls_back(self):
        assert Backend.resolve("flickr") is Backend.CLOUDINARY
