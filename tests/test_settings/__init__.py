import io

import pytest

from ioshim.exceptions import UnsupportedResourceType
from ioshim.providers.file import FileUrlReader
from ioshim.providers.http import HttpUrlReader
from ioshim.registry import StreamProviders
from ioshim.resources import FileUrl, HttpUrl, Stdin
from ioshim.settings import (
    SETTINGS_PRIORITIES,
    BaseSettings,
    Settings,
    SettingsAttribute,
    get_settings_priority,
)
from ioshim.streams import Direction, StreamOptions


class TestPriorities:
    def test_get_settings_priority(self):
        for prio_str, prio_num in SETTINGS_PRIORITIES.items():
            assert get_settings_priority(prio_str) == prio_num
        assert get_settings_priority(99) == 99

    def test_attribute_keeps_higher_priority(self):
        attribute = SettingsAttribute("utf-8", 40)
        attribute.set("latin-1", 20)
        assert attribute.value == "utf-8"
        attribute.set("ascii", 40)
        assert attribute.value == "ascii"
        assert repr(attribute) == "<SettingsAttribute value='ascii' priority=40>"

    def test_cmdline_beats_project(self):
        settings = Settings({"ENCODING": "ascii"}, priority="cmdline")
        settings.set("ENCODING", "latin-1")
        assert settings["ENCODING"] == "ascii"
        assert settings.getpriority("ENCODING") == 40

    def test_defaults(self):
        settings = Settings()
        assert settings["ENCODING"] == "utf-8"
        assert settings.getint("BUFFER_SIZE") == io.DEFAULT_BUFFER_SIZE
        assert settings.getpriority("ENCODING") == 0
        assert settings.getpriority("MISSING") is None
        assert settings["MISSING"] is None
        assert settings.get("MISSING", "fallback") == "fallback"

    def test_setitem_uses_project_priority(self):
        settings = Settings()
        settings["NEWLINE"] = ""
        assert settings["NEWLINE"] == ""
        assert settings.getpriority("NEWLINE") == 20

    def test_setmodule_by_path(self):
        settings = Settings()
        settings.setmodule("tests.test_settings.default_settings", "cmdline")
        assert settings["ENCODING"] == "latin-1"
        assert settings.getfloat("HTTP_TIMEOUT") == 5.0
        assert settings["HTTP_USER_AGENT"] == "ioshim"
        assert "http_user_agent" not in settings


class TestGetBool:
    @pytest.mark.parametrize("value", ["1", 1, True, "True", "true"])
    def test_enabled(self, value):
        assert Settings({"LOG_ENABLED": value}).getbool("LOG_ENABLED") is True

    @pytest.mark.parametrize("value", ["0", 0, False, "False", "false"])
    def test_disabled(self, value):
        assert Settings({"LOG_ENABLED": value}).getbool("LOG_ENABLED") is False

    def test_missing(self):
        assert BaseSettings().getbool("LOG_ENABLED", True) is True

    def test_unsupported(self):
        settings = Settings({"LOG_FILE_APPEND": "on"})
        with pytest.raises(ValueError, match="Supported values for boolean settings"):
            settings.getbool("LOG_FILE_APPEND")


class TestStreamProvidersSetting:
    def test_defaults_promoted(self):
        providers = Settings()["STREAM_PROVIDERS_BASE"]
        assert isinstance(providers, BaseSettings)
        assert providers.getpriority("ioshim.providers.http.HttpUrlReader") == 0

    def test_user_providers_extend_base(self):
        settings = Settings({"STREAM_PROVIDERS": {"my.Provider": 1}})
        providers = settings.getwithbase("STREAM_PROVIDERS")
        assert providers["my.Provider"] == 1
        assert providers["ioshim.providers.file.FileUrlReader"] == 100

    def test_user_order_overrides_base(self):
        settings = Settings(
            {"STREAM_PROVIDERS": {"ioshim.providers.http.HttpUrlReader": 5}}
        )
        providers = settings.getwithbase("STREAM_PROVIDERS")
        assert providers["ioshim.providers.http.HttpUrlReader"] == 5
        assert len(providers) == len(settings["STREAM_PROVIDERS_BASE"])

    def test_user_base_replaces_default_base(self):
        settings = Settings({"STREAM_PROVIDERS_BASE": {"my.Provider": 1}})
        assert set(settings.getwithbase("STREAM_PROVIDERS")) == {"my.Provider"}

    def test_provider_classes_as_keys(self):
        settings = Settings({"STREAM_PROVIDERS": {FileUrlReader: 50}})
        assert settings.getwithbase("STREAM_PROVIDERS")[FileUrlReader] == 50

    def test_none_disables_provider(self):
        settings = Settings()
        settings.setmodule("tests.test_settings.default_settings")
        providers = StreamProviders.from_settings(settings)
        assert (Stdin, Direction.READ) not in providers
        assert (HttpUrl, Direction.READ) in providers
        with pytest.raises(UnsupportedResourceType):
            providers.lookup(Stdin())

    def test_base_name_must_be_string(self):
        with pytest.raises(ValueError, match="must be a string"):
            Settings().getwithbase(1)

    def test_missing_setting_composes_empty(self):
        assert dict(BaseSettings().getwithbase("STREAM_PROVIDERS")) == {}


class TestSettingsFlow:
    def test_stream_options(self):
        settings = Settings(
            {
                "BUFFER_SIZE": "64",
                "ENCODING": "latin-1",
                "ENCODING_ERRORS": "replace",
                "NEWLINE": "",
            }
        )
        options = StreamOptions.from_settings(settings)
        assert options.buffer_size == 64
        assert options.encoding == "latin-1"
        assert options.errors == "replace"
        assert options.newline == ""

    def test_stream_options_defaults(self):
        options = StreamOptions.from_settings(Settings())
        assert options.buffer_size == io.DEFAULT_BUFFER_SIZE
        assert options.encoding == "utf-8"
        assert options.errors == "strict"
        assert options.newline is None

    def test_http_reader(self):
        settings = Settings({"HTTP_TIMEOUT": "2.5", "ENCODING": "latin-1"})
        reader = StreamProviders.from_settings(settings).lookup(
            HttpUrl("http://example.com/")
        )
        assert isinstance(reader, HttpUrlReader)
        assert reader.timeout == 2.5
        assert reader.user_agent == "ioshim"
        assert reader.options.encoding == "latin-1"

    def test_file_reader_buffer_size(self):
        settings = Settings({"BUFFER_SIZE": 10})
        reader = StreamProviders.from_settings(settings).lookup(
            FileUrl("/tmp/data.txt")
        )
        assert reader.options.buffer_size == 10
