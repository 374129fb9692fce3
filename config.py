import os
import log
import logging
from dotenv import load_dotenv
from models.runtime import DEFAULT_POWER

# Load .env file into environment
load_dotenv()

logger = logging.getLogger(__name__)


def _split_tokens(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [token.strip() for token in raw.split(",") if token.strip()]


class Config:
    def __init__(self):
        self.log_level = os.getenv("LOG_LEVEL", default="INFO")
        self.log_file = os.getenv("LOG_FILE", default="tool_server.log")
        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = int(os.getenv("PORT", 3000))

        # BEARER_TOKEN is the single token the orchestration platform is configured with,
        # VALID_TOKENS allows rotating in additional ones
        self.valid_tokens = _split_tokens(os.getenv("VALID_TOKENS")) + _split_tokens(os.getenv("BEARER_TOKEN"))

        self.unsplash_access_key = os.getenv("UNSPLASH_ACCESS_KEY", "")
        self.unsplash_api_url = os.getenv("UNSPLASH_API_URL", "https://api.unsplash.com")
        self.unsplash_timeout = float(os.getenv("UNSPLASH_TIMEOUT", 10))

        # Empty VALKEY_HOST keeps the in-memory cache
        self.valkey_host = os.getenv("VALKEY_HOST", "")
        self.valkey_port = int(os.getenv("VALKEY_PORT", 6379))
        self.image_cache_ttl = int(os.getenv("IMAGE_CACHE_TTL", 300))

        self.default_power = float(os.getenv("DEFAULT_POWER", DEFAULT_POWER))

        # Call setup_logging when the application starts
        log.setup_logging(self.log_level, self.log_file)

        # power is a fraction; a percentage such as 80 would turn every request into a 400
        if not (0 < self.default_power < 1):
            logger.error("DEFAULT_POWER must be strictly between 0 and 1, got %s. Using %s.",
                         self.default_power, DEFAULT_POWER)
            self.default_power = DEFAULT_POWER

    @property
    def auth_enabled(self) -> bool:
        return bool(self.valid_tokens)

    def __repr__(self):
        return (f"<Settings port={self.port} loglevel={self.log_level} auth={self.auth_enabled} "
                f"valkey={self.valkey_host}:{self.valkey_port} default_power={self.default_power}>")

config = Config()
