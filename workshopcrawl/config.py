import os
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

loaded = load_dotenv()
if not loaded and Path(".env").exists():
	raise RuntimeError(".env file present but failed to load")


def get_optional_str_env(name: str) -> Optional[str]:
	raw = os.getenv(name)
	if raw is None or raw.strip() == "":
		return None
	return raw


def get_str_env(name: str, default: str) -> str:
	raw = get_optional_str_env(name)
	return default if raw is None else raw


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except ValueError:
		logger.exception("Invalid %s: %r", name, raw)
		return default


WORKSHOP_HOST = get_str_env("WORKSHOP_HOST", "steamcommunity.com")
USER_AGENT = get_str_env("USER_AGENT", "WorkshopCrawl/0.1")
HTTP_TIMEOUT = get_int_env("HTTP_TIMEOUT", 10)
CRAWL_DELAY_MS = get_int_env("CRAWL_DELAY_MS", 25)
CRAWL_JITTER_MS = get_int_env("CRAWL_JITTER_MS", 0)
OUTPUT_DIR = get_str_env("OUTPUT_DIR", ".")
LOG_LEVEL = get_str_env("LOG_LEVEL", "INFO")
