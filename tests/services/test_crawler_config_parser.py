import pytest

from linkscout import config
from linkscout.domain import CrawlSession
from linkscout.exceptions import CrawlerConfigError
from linkscout.services.crawler_config_parser import CrawlerConfigParser


def test_parse_full_config():
    data = {
        "root_url": " https://example.com ",
        "timeout_seconds": 30,
        "user_agent": "TestBot/1.0",
        "blacklist": ["/tag/", "/print"],
        "blacklist_override": True,
    }
    cfg = CrawlerConfigParser().parse(config_path="/etc/linkscout/site.yml", data=data)
    assert cfg.root_url == "https://example.com"
    assert cfg.timeout_seconds == 30
    assert cfg.user_agent == "TestBot/1.0"
    assert cfg.blacklist == ("/tag/", "/print")
    assert cfg.blacklist_override is True
    assert cfg.config_path == "site.yml"


def test_parse_minimal_config_uses_defaults():
    cfg = CrawlerConfigParser().parse(config_path="site.yml", data={"root_url": "https://example.com"})
    assert cfg.timeout_seconds == config.CRAWL_TIMEOUT_SECONDS
    assert cfg.user_agent == config.USER_AGENT
    assert cfg.blacklist == ()
    assert cfg.blacklist_override is False


def test_null_timeout_disables_budget():
    cfg = CrawlerConfigParser().parse(config_path="site.yml", data={"root_url": "https://example.com", "timeout_seconds": None})
    assert cfg.timeout_seconds is None


def test_single_string_blacklist():
    cfg = CrawlerConfigParser().parse(config_path="site.yml", data={"root_url": "https://example.com", "blacklist": "/tag/"})
    assert cfg.blacklist == ("/tag/",)


def test_missing_root_url_returns_none():
    assert CrawlerConfigParser().parse(config_path="site.yml", data={"timeout_seconds": 5}) is None


@pytest.mark.parametrize("data", [
    {"root_url": ""},
    {"root_url": 42},
    {"root_url": "https://example.com", "blacklist": [1, 2]},
    {"root_url": "https://example.com", "blacklist": {"a": 1}},
    {"root_url": "https://example.com", "timeout_seconds": "soon"},
    {"root_url": "https://example.com", "timeout_seconds": -5},
    {"root_url": "https://example.com", "timeout_seconds": True},
])
def test_invalid_values_raise(data):
    with pytest.raises(CrawlerConfigError) as excinfo:
        CrawlerConfigParser().parse(config_path="site.yml", data=data)
    assert excinfo.value.config_path == "site.yml"


def test_empty_blacklist_override_clears_session_defaults():
    cfg = CrawlerConfigParser().parse(
        config_path="site.yml",
        data={"root_url": "http://example.com", "blacklist": [], "blacklist_override": True},
    )
    assert CrawlSession(cfg).blacklist.entries == []
