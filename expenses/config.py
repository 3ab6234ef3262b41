import os
from dataclasses import dataclass


@dataclass(frozen=True)
class AppConfig:
    """Settings read from the environment."""
    log_level: str
    currency: str
    max_day: int

    @staticmethod
    def load() -> "AppConfig":
        log_level = os.getenv("LEDGER_LOG_LEVEL", "INFO")
        currency = os.getenv("LEDGER_CURRENCY", "KZT")
        raw_max_day = os.getenv("LEDGER_MAX_DAY", "31")

        try:
            max_day = int(raw_max_day)
        except ValueError:
            raise RuntimeError(f"LEDGER_MAX_DAY must be an integer, got {raw_max_day!r}")
        if max_day < 1:
            raise RuntimeError(f"LEDGER_MAX_DAY must be positive, got {max_day}")

        return AppConfig(
            log_level=log_level,
            currency=currency,
            max_day=max_day,
        )
