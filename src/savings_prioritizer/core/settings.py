import math
import os
from collections.abc import Mapping

from dotenv import find_dotenv, load_dotenv

from savings_prioritizer.analyzers.weights import DEFAULT_DISCRETION, merge_discretion_weights
from savings_prioritizer.domain.overrides import parse_weight_overrides
from savings_prioritizer.logger import get_logger
from savings_prioritizer.models import SpendingCategory

logger = get_logger(__name__)


CONFIG_FILENAME = "config.yaml"

DEFAULT_TOP_OPPORTUNITIES = 3

WEIGHT_MODES = ("merge", "replace")

_CONFIG_FILE_PATH: str | None = None
_CONFIG_FILE_VALUES: dict[str, str] = {}

_CONFIG_KEYS = (
    "LOG_LEVEL",
    "LOG_DIR",
    "DISCRETION_WEIGHTS",
    "DISCRETION_WEIGHTS_MODE",
    "DEFAULT_DISCRETION",
    "TOP_OPPORTUNITIES",
)


def _resolve_dotenv_path() -> str | None:
    config_dir = os.getenv("CONFIG_DIR")
    if config_dir:
        candidate = os.path.join(config_dir, ".env")
        if os.path.exists(candidate):
            return candidate
    resolved = find_dotenv(usecwd=True)
    return resolved or None


def _resolve_config_path() -> str:
    config_dir = os.getenv("CONFIG_DIR")
    if config_dir:
        return os.path.join(config_dir, CONFIG_FILENAME)
    cwd = os.getcwd()
    candidate = os.path.join(cwd, "config", CONFIG_FILENAME)
    if os.path.exists(candidate):
        return candidate
    return os.path.join(cwd, CONFIG_FILENAME)


def _strip_inline_comment(raw_value: str) -> str:
    quote: str | None = None
    for index, char in enumerate(raw_value):
        if char in "\"'":
            if quote is None:
                quote = char
            elif quote == char:
                quote = None
        elif char == "#" and quote is None:
            return raw_value[:index].rstrip()
    return raw_value


def _unquote_value(raw_value: str) -> str:
    if len(raw_value) >= 2 and raw_value[0] == raw_value[-1] and raw_value[0] in "\"'":
        return raw_value[1:-1]
    return raw_value


def read_config_file(path: str | None) -> dict[str, str]:
    """Read flat ``KEY: value`` lines; anything nested or empty is skipped."""
    if not path or not os.path.exists(path):
        return {}

    values: dict[str, str] = {}
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            stripped = line.strip()
            if not stripped or stripped.startswith("#") or ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            key = key.strip()
            value = _unquote_value(_strip_inline_comment(raw_value).strip())
            if key and value:
                values[key] = value
    return values


def load_environment() -> None:
    global _CONFIG_FILE_PATH
    global _CONFIG_FILE_VALUES

    dotenv_path = _resolve_dotenv_path()
    if dotenv_path:
        load_dotenv(dotenv_path=dotenv_path, override=False)

    _CONFIG_FILE_PATH = _resolve_config_path()
    _CONFIG_FILE_VALUES = read_config_file(_CONFIG_FILE_PATH)

    for key in _CONFIG_KEYS:
        if key not in os.environ and key in _CONFIG_FILE_VALUES:
            os.environ[key] = _CONFIG_FILE_VALUES[key]


def get_config_path() -> str | None:
    return _CONFIG_FILE_PATH


def ensure_dir(path: str | None) -> None:
    if path and path not in {".", "./"}:
        os.makedirs(path, exist_ok=True)


def get_env_int(name: str, default: int, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("[ENV] Invalid %s='%s', using default %s.", name, raw, default)
        return default
    if min_value is not None and value < min_value:
        logger.warning(
            "[ENV] %s='%s' below minimum %s, using default %s.",
            name,
            raw,
            min_value,
            default,
        )
        return default
    return value


def get_env_float(name: str, default: float = 0.0, min_value: float | None = None) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("[ENV] Invalid %s='%s', using default %s.", name, raw, default)
        return default
    if not math.isfinite(value):
        logger.warning("[ENV] Non-finite %s='%s', using default %s.", name, raw, default)
        return default
    if min_value is not None and value < min_value:
        logger.warning(
            "[ENV] %s='%s' below minimum %s, using default %s.",
            name,
            raw,
            min_value,
            default,
        )
        return default
    return value


def get_weight_mode() -> str:
    raw = os.getenv("DISCRETION_WEIGHTS_MODE", "merge").strip().lower()
    if raw not in WEIGHT_MODES:
        logger.warning("[ENV] Invalid DISCRETION_WEIGHTS_MODE='%s', using 'merge'.", raw)
        return "merge"
    return raw


def get_discretion_weights() -> Mapping[SpendingCategory, float]:
    """
    Discretion table from DISCRETION_WEIGHTS.

    In "replace" mode the overrides are the whole table, so categories they
    leave out score with DEFAULT_DISCRETION.
    """
    overrides = parse_weight_overrides(os.getenv("DISCRETION_WEIGHTS"))
    if get_weight_mode() == "replace":
        return merge_discretion_weights(overrides, base={})
    return merge_discretion_weights(overrides)


def get_default_discretion() -> float:
    return get_env_float("DEFAULT_DISCRETION", DEFAULT_DISCRETION, min_value=0.0)


def get_top_opportunities() -> int:
    return get_env_int("TOP_OPPORTUNITIES", DEFAULT_TOP_OPPORTUNITIES, min_value=1)


def log_environment() -> None:
    logger.info("[ENV] Config file: %s", get_config_path() or "<none>")
    for key in _CONFIG_KEYS:
        value = os.getenv(key)
        logger.info("[ENV] %s=%s", key, "<unset>" if value is None else value)


load_environment()

LOG_DIR = os.getenv("LOG_DIR")
CONFIG_DIR = os.getenv("CONFIG_DIR")

ensure_dir(LOG_DIR)
ensure_dir(CONFIG_DIR)
