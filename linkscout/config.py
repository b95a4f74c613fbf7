import os
import logging
from pathlib import Path
from typing import Optional

try:
	from dotenv import load_dotenv
except ImportError:
	logging.warning("python-dotenv not available; using environment variables only")
else:
	loaded = load_dotenv()
	if not loaded and Path(".env").exists():
		raise RuntimeError(".env file present but failed to load")

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"
DEFAULT_BLACKLIST = (
	"mailto:",
	"javascript:",
	".pdf",
	"storage",
	"index.php",
	"tel:",
	"#",
)


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def _get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def _get_optional_int_env(name: str, default: Optional[int] = None) -> Optional[int]:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	if raw.strip().lower() in ("none", "null", "off"):
		return None
	try:
		return int(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def _get_bool_env(name: str, default: bool) -> bool:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	value = raw.strip().lower()
	if value in ("1", "true", "yes", "on"):
		return True
	if value in ("0", "false", "no", "off"):
		return False
	logging.error("Invalid %s: %r", name, raw)
	return default


USER_AGENT = get_str_env("USER_AGENT", DEFAULT_USER_AGENT)
# wall-clock budget for a whole crawl; "none" disables it
CRAWL_TIMEOUT_SECONDS = _get_optional_int_env("CRAWL_TIMEOUT_SECONDS", 60)
HTTP_TIMEOUT_SECONDS = _get_int_env("HTTP_TIMEOUT_SECONDS", 60)
HTTP_MAX_REDIRECTS = _get_int_env("HTTP_MAX_REDIRECTS", 10)
HTTP_VERIFY_TLS = _get_bool_env("HTTP_VERIFY_TLS", False)
