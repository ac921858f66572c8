import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env before Settings reads the environment.
# If DOTENV_FILE is set, load that; otherwise default to .env
_env_file = os.getenv("DOTENV_FILE")
if _env_file:
    load_dotenv(_env_file)
else:
    load_dotenv()

log = logging.getLogger("config")


def _b(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).strip().lower() in {
        "1",
        "true",
        "yes",
        "y",
        "on",
    }


def _env_float(name: str, default: float) -> float:
    """
    Read a float from env. Returns ``default`` if unset, blank, or non-numeric.
    """
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_str_opt(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return raw


@dataclass
class Settings:
    # Bot token used for the Authorization header on REST calls.
    discord_bot_token: str = os.getenv("DISCORD_BOT_TOKEN", "")

    # Versioned REST root; override to point at a proxy or a fake server.
    discord_api_base: str = os.getenv(
        "DISCORD_API_BASE", "https://discord.com/api/v10"
    )
    discord_timeout_secs: float = _env_float("DISCORD_TIMEOUT_SECS", 10.0)

    # Optional JSON file of extra aliases, {"NAME": ["SYM", ...]}.
    aliases_file: str = os.getenv("ALIASES_FILE", "")

    # When set, outgoing messages are tagged so test-server traffic can be
    # told apart from production.
    test_prefix: Optional[str] = _env_str_opt("BROKERBOT_TEST_PREFIX")

    # Logging
    # Blank means "use the level passed to setup_logging()".
    log_level: str = os.getenv("LOG_LEVEL", "")
    log_plain: bool = _b("LOG_PLAIN", False)

    data_dir: Path = field(default_factory=lambda: Path(os.getenv("DATA_DIR", "data")))

    @property
    def test_mode(self) -> bool:
        return self.test_prefix is not None


SETTINGS = Settings()


def get_settings() -> Settings:
    return SETTINGS


def enter_test_mode(prefix: str) -> None:
    """Tag outgoing messages with ``prefix`` to identify a test server."""
    SETTINGS.test_prefix = prefix
    log.info("test_mode_enabled prefix=%r", prefix)


def exit_test_mode() -> None:
    """Stop tagging outgoing messages."""
    SETTINGS.test_prefix = None
    log.info("test_mode_disabled")


def get_test_prefix() -> Optional[str]:
    return SETTINGS.test_prefix
