import os
from dataclasses import dataclass


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


@dataclass
class Settings:
    """
    Runtime settings for the analytics service.

    Attributes:
        log_level (str): Root log level name.
        seed (int): Seed of the demo dataset loaded at startup.
        top_products_limit (int): Number of products listed per seller.
    """

    log_level: str = "INFO"
    seed: int = 42
    top_products_limit: int = 10

    @classmethod
    def from_env(cls, prefix: str = "SALES_ANALYTICS_") -> "Settings":
        return cls(
            log_level=os.getenv(f"{prefix}LOG_LEVEL", "INFO").upper(),
            seed=_int_env(f"{prefix}SEED", 42),
            top_products_limit=max(1, _int_env(f"{prefix}TOP_PRODUCTS", 10)),
        )
