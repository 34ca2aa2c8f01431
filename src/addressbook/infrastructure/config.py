"""Settings read from the environment (and a .env file when present)."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from addressbook.infrastructure.phone import is_known_region

logger = logging.getLogger(__name__)

DEFAULT_PHONE_REGION = "SG"


@dataclass(frozen=True)
class Settings:
    # Region assumed for phone numbers typed without a country code.
    phone_region: str = DEFAULT_PHONE_REGION

    @classmethod
    def from_env(cls, env_file: Path | None = None) -> "Settings":
        """Load .env (explicit path, else from the current directory) and build Settings."""
        if env_file is not None:
            load_dotenv(env_file)
        else:
            load_dotenv(Path.cwd() / ".env")
        region = os.environ.get("ADDRESSBOOK_PHONE_REGION", DEFAULT_PHONE_REGION).strip().upper()
        if not is_known_region(region):
            logger.warning(
                "Unknown ADDRESSBOOK_PHONE_REGION %r, using %s", region, DEFAULT_PHONE_REGION
            )
            region = DEFAULT_PHONE_REGION
        return cls(phone_region=region)
