import pytest
from pydantic import ValidationError

from data_extractor.extractors import CssSelectorDataExtractor
from data_extractor.settings import Settings, settings


class TestSettings:
    """Test configuration defaults and overrides."""

    def test_defaults(self):
        config = Settings(_env_file=None)
        assert config.HTML_PARSER == "lxml"
        assert config.ENCODING == "utf-8"
        assert config.FILE_SUFFIX == ".html"
        assert config.MAX_WORKERS >= 1

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("DATA_EXTRACTOR_MAX_WORKERS", "3")
        monkeypatch.setenv("DATA_EXTRACTOR_FILE_SUFFIX", ".xml")

        config = Settings(_env_file=None)

        assert config.MAX_WORKERS == 3
        assert config.FILE_SUFFIX == ".xml"

    def test_max_workers_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(MAX_WORKERS=0)

    def test_extractor_uses_given_settings(self):
        config = Settings(HTML_PARSER="html.parser")
        assert CssSelectorDataExtractor(config).settings is config
        assert CssSelectorDataExtractor().settings is settings

    def test_parser_from_settings(self):
        extractor = CssSelectorDataExtractor(Settings(HTML_PARSER="html.parser"))
        result = extractor.extract("<ul><li>A</li><li>B</li></ul>", {"items": "//ul/li"})
        assert result["items"] == ["A", "B"]
