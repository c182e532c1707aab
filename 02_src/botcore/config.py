"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DATA_DIR = PROJECT_ROOT / "03_data"
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_DB_PATH = DATA_DIR / "botcore.db"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

DATA_DIR.mkdir(parents=True, exist_ok=True)
LOGS_DIR.mkdir(parents=True, exist_ok=True)


PathLike = Union[str, Path]


def resolve_db_path(env_value: PathLike | None = None) -> PathLike:
    """Resolve DATABASE_URL to an absolute path."""
    if not env_value:
        return DEFAULT_DB_PATH

    if str(env_value) == ":memory:":
        return ":memory:"

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate


@dataclass
class BotConfig:
    """Runtime settings of a bot."""

    bot_id: str = "botcore"
    locale: str = "en"
    intent_threshold: float = 0.8
    max_intents: int = 2
    db_path: PathLike = DEFAULT_DB_PATH
    brain: str = "sqlite"  # "sqlite" or "memory"
    classifier: str = "llm"  # "llm" or "pattern"
    default_message: str = "Sorry, I did not understand."

    @classmethod
    def from_env(cls) -> "BotConfig":
        """Build a config from environment variables."""
        return cls(
            bot_id=os.getenv("BOT_ID", "botcore"),
            locale=os.getenv("BOT_LOCALE", "en"),
            intent_threshold=float(os.getenv("INTENT_THRESHOLD", "0.8")),
            max_intents=int(os.getenv("MAX_INTENTS", "2")),
            db_path=resolve_db_path(os.getenv("DATABASE_URL")),
            brain=os.getenv("BOT_BRAIN", "sqlite"),
            classifier=os.getenv("BOT_CLASSIFIER", "llm"),
            default_message=os.getenv(
                "DEFAULT_MESSAGE", "Sorry, I did not understand."
            ),
        )
