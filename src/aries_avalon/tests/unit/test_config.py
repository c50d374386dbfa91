import pytest

from aries_avalon.__main__ import parse_args, settings_from_args
from aries_avalon.integrations.solr.client import SolrClient
from aries_avalon.platform.config import Settings


def _select_url(settings: Settings) -> str:
    return SolrClient(settings.solr_url, settings.solr_core).select_url


def test_defaults() -> None:
    settings = Settings()
    assert settings.api_port == 8080
    assert settings.solr_core == "avalon"
    assert settings.solr_timeout_seconds == 10.0
    assert _select_url(settings) == (
        "http://avalon.lib.virginia.edu:8983/solr/avalon/select"
    )


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SOLR_URL", "http://localhost:8983/solr/")
    monkeypatch.setenv("SOLR_CORE", "staging")
    monkeypatch.setenv("AVALON_URL", "http://localhost:3000")

    settings = Settings()

    assert _select_url(settings) == "http://localhost:8983/solr/staging/select"
    assert settings.avalon_url == "http://localhost:3000"


def test_command_line_flags_override_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SOLR_CORE", "from-env")

    settings = settings_from_args(
        parse_args(
            ["-port", "9090", "-solrcore", "from-flag", "--avalonurl", "http://av"]
        )
    )

    assert settings.api_port == 9090
    assert settings.solr_core == "from-flag"
    assert settings.avalon_url == "http://av"


def test_unset_flags_keep_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SOLR_CORE", "from-env")

    settings = settings_from_args(parse_args([]))

    assert settings.solr_core == "from-env"
