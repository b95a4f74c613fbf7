import argparse
import json
import logging
import sys
from typing import Optional

from linkscout import config
from linkscout.domain import CrawlerConfig, CrawlSession
from linkscout.exceptions import CrawlerConfigError
from linkscout.services.config_file_store import ConfigFileStore
from linkscout.services.crawler import Crawler
from linkscout.services.crawler_config_parser import CrawlerConfigParser

logger = logging.getLogger("linkscout")


def load_config(config_path: str, store: Optional[ConfigFileStore] = None, parser: Optional[CrawlerConfigParser] = None) -> CrawlerConfig:
    store = store or ConfigFileStore()
    parser = parser or CrawlerConfigParser()
    data = store.load_yaml_dict(config_path)
    if data is None:
        raise CrawlerConfigError(config_path, "not found or not a YAML mapping")
    cfg = parser.parse(config_path=config_path, data=data)
    if cfg is None:
        raise CrawlerConfigError(config_path, "has no root_url")
    return cfg


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Discover all same-host links reachable from a URL and print them as JSON."
    )
    parser.add_argument("url", nargs="?", help="Seed URL (e.g. https://example.com)")
    parser.add_argument("--config", help="YAML crawler config file")
    timeout = parser.add_mutually_exclusive_group()
    timeout.add_argument("--timeout", type=int, help=f"Crawl budget in seconds (default: {config.CRAWL_TIMEOUT_SECONDS})")
    timeout.add_argument("--no-timeout", action="store_true", help="Crawl until no new links remain")
    parser.add_argument("--user-agent", help="User-Agent header")
    parser.add_argument("--blacklist", action="append", default=[], metavar="SUBSTRING", help="Skip links containing SUBSTRING (repeatable)")
    parser.add_argument("--replace-blacklist", action="store_true", help="Replace the default blacklist instead of extending it")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    return parser


def main(argv=None, crawler_factory=Crawler) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        cfg = load_config(args.config) if args.config else CrawlerConfig()
    except CrawlerConfigError as e:
        logger.error("%s", e)
        return 2

    seed = args.url or cfg.root_url
    if not seed:
        logger.error("No seed URL given (pass a URL or a config with root_url)")
        return 2

    crawler = crawler_factory(session=CrawlSession(cfg))
    if args.no_timeout:
        crawler.set_timeout(None)
    elif args.timeout is not None:
        crawler.set_timeout(args.timeout)
    if args.user_agent:
        crawler.set_user_agent(args.user_agent)
    if args.blacklist or args.replace_blacklist:
        crawler.set_blacklist(args.blacklist, override=args.replace_blacklist)

    result = crawler.crawl(seed)
    if result.timed_out:
        logger.warning("Time budget reached; %d links found so far", len(result.links))

    print(json.dumps(result.links, ensure_ascii=False, indent=2 if args.pretty else None))
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
