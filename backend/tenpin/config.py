import logging
import os

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _parse_bool(env_var: str, default: bool = False) -> bool:
    raw_value = os.getenv(env_var)
    if raw_value is None:
        return default

    value = raw_value.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False

    logger.warning(
        "%s is not a valid boolean (got %r); defaulting to %s",
        env_var,
        raw_value,
        default,
    )
    return default


def get_strict_rolls() -> bool:
    """Whether roll logs are validated before scoring (``TENPIN_STRICT_ROLLS``)."""
    return _parse_bool("TENPIN_STRICT_ROLLS")
