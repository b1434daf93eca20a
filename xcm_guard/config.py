import os
from decimal import Decimal

from dotenv import load_dotenv

from xcm_guard.core.assets import Asset
from xcm_guard.core.chains import Chain

load_dotenv()


def _decimal_env(name: str, default: str) -> Decimal:
    return Decimal(os.getenv(name, default))


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _enum_set_env(name: str, enum_cls) -> frozenset:
    value = os.getenv(name)
    if not value:
        return frozenset(enum_cls)
    items = [item.strip() for item in value.split(",") if item.strip()]
    try:
        return frozenset(enum_cls(item) for item in items)
    except ValueError:
        raise ValueError(f"Invalid {name} entry in {value!r}") from None


class Settings:
    def __init__(self):
        self.PROJECT_NAME = "XCM Guard"
        self.PROJECT_VERSION = "1.0.0"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

        # Route amount bounds, in units of the transferred asset
        self.STABLE_MIN_AMOUNT = _decimal_env("STABLE_MIN_AMOUNT", "0.10")
        self.TELEPORT_MIN_AMOUNT = _decimal_env("TELEPORT_MIN_AMOUNT", "0.05")
        self.ADVANCED_MIN_AMOUNT = _decimal_env("ADVANCED_MIN_AMOUNT", "0.05")
        self.ADVANCED_MAX_AMOUNT = _decimal_env("ADVANCED_MAX_AMOUNT", "0.50")
        self.ADVANCED_ROUTE_ENABLED = _bool_env("ADVANCED_ROUTE_ENABLED", True)

        # Bootstrap buffers per destination chain: (fee buffer, safety buffer)
        self.BOOTSTRAP_BUFFERS = {
            "relay": (
                _decimal_env("RELAY_BOOTSTRAP_FEE_BUFFER", "0.01"),
                _decimal_env("RELAY_BOOTSTRAP_SAFETY_BUFFER", "0.05"),
            ),
            "people": (
                _decimal_env("PEOPLE_BOOTSTRAP_FEE_BUFFER", "0.01"),
                _decimal_env("PEOPLE_BOOTSTRAP_SAFETY_BUFFER", "0.05"),
            ),
        }

        # Service fee clamps per asset class
        self.SERVICE_FEES = {
            "native": {
                "pct": _decimal_env("NATIVE_SERVICE_FEE_PCT", "0.0015"),
                "min": _decimal_env("NATIVE_SERVICE_FEE_MIN", "0.02"),
                "max": _decimal_env("NATIVE_SERVICE_FEE_MAX", "0.20"),
            },
            "stable": {
                "pct": _decimal_env("STABLE_SERVICE_FEE_PCT", "0.0015"),
                "min": _decimal_env("STABLE_SERVICE_FEE_MIN", "0.02"),
                "max": _decimal_env("STABLE_SERVICE_FEE_MAX", "0.20"),
            },
        }
        self.FEE_DECIMALS = int(os.getenv("FEE_DECIMALS", "6"))
        self.DEFAULT_NETWORK_FEE_ESTIMATE = os.getenv(
            "DEFAULT_NETWORK_FEE_ESTIMATE", "0.012"
        )

        # Unset means every known asset/chain is accepted
        self.SUPPORTED_ASSETS = _enum_set_env("SUPPORTED_ASSETS", Asset)
        self.SUPPORTED_CHAINS = _enum_set_env("SUPPORTED_CHAINS", Chain)

        self.EVALUATION_CACHE_SIZE = int(os.getenv("EVALUATION_CACHE_SIZE", "1024"))


settings = Settings()
