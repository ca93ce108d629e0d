from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env if present
load_dotenv()

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    log_level: str = os.getenv("BRDOCS_LOG_LEVEL", "WARNING")
    default_hint: str = os.getenv("BRDOCS_DEFAULT_HINT", "unknown")
    bench_count: int = int(os.getenv("BRDOCS_BENCH_COUNT", "100000"))
    batch_limit: int = int(os.getenv("BRDOCS_BATCH_LIMIT", "10000"))


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)
