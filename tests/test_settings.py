"""Unit tests for ReaderSettings and load_settings()."""

import pydantic
import pytest

from rsvp_reader.settings import ReaderSettings, load_settings


class TestReaderSettings:
    def test_defaults(self):
        settings = ReaderSettings()
        assert settings.default_speed == 400
        assert settings.intelligent_pause is True
        assert settings.pause_multiplier == pytest.approx(1.5)
        assert settings.use_dictionary_tokenizer is True

    @pytest.mark.parametrize("multiplier", [0, -1.0])
    def test_pause_multiplier_must_be_positive(self, multiplier):
        with pytest.raises(pydantic.ValidationError):
            ReaderSettings(pause_multiplier=multiplier)

    @pytest.mark.parametrize("speed", [100, 1250])
    def test_speed_bounds(self, speed):
        with pytest.raises(pydantic.ValidationError):
            ReaderSettings(default_speed=speed)

    def test_unknown_field_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            ReaderSettings(font_size=12)

    def test_frozen(self):
        settings = ReaderSettings()
        with pytest.raises(pydantic.ValidationError):
            settings.default_speed = 600

    def test_model_copy(self):
        settings = ReaderSettings().model_copy(update={"intelligent_pause": False})
        assert settings.intelligent_pause is False

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            ReaderSettings(pause_multiplier=0)


class TestLoadSettings:
    def test_overrides(self):
        settings = load_settings(default_speed=600, intelligent_pause=False)
        assert settings.default_speed == 600
        assert settings.intelligent_pause is False

    def test_none_overrides_ignored(self):
        settings = load_settings(default_speed=None, pause_multiplier=None)
        assert settings == load_settings()

    def test_invalid_override(self):
        with pytest.raises(pydantic.ValidationError):
            load_settings(default_speed=50)
