from dataclasses import dataclass
import os

def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")

@dataclass(frozen=True)
class AppConfig:
    env: str; log_level: str; log_json: bool; printable: bool
    @property
    def debug(self) -> bool: return self.log_level.upper() == "DEBUG"

def load_config() -> "AppConfig":
    return AppConfig(os.getenv("BANKCHECK_ENV", "dev"),
        os.getenv("BANKCHECK_LOG_LEVEL", "WARNING").upper(),
        _flag("BANKCHECK_LOG_JSON", "0"),
        _flag("BANKCHECK_PRINTABLE", "1"))
