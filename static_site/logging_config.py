# =============================================================================
# static_site/logging_config.py - Process-Wide Logging Setup
# =============================================================================
# Configures the standard logging module once, before any request is served.
#
# LOG_FILTER holds comma-separated directives:
#   "info"                          -> root logger at INFO
#   "static_site=debug"             -> static_site logger at DEBUG, root at WARNING
#   "warning,static_site=debug"     -> both
#
# A filter that cannot be parsed is replaced by DEFAULT_LOG_FILTER.
# =============================================================================

import logging

from static_site.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_LOG_FILTER = "static_site=debug"

LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "off": logging.CRITICAL + 10,
}


def _parse_level(value: str, log_filter: str) -> int:
    try:
        return LEVELS[value.strip().lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown log level '{value}' in LOG_FILTER",
            details={"log_filter": log_filter, "allowed": sorted(LEVELS)}
        ) from None


def parse_log_filter(log_filter: str) -> tuple[int, dict[str, int]]:
    """
    Parse a LOG_FILTER string.

    Args:
        log_filter: Directives such as "info" or "static_site=debug,uvicorn=info"

    Returns:
        Tuple of (root level, {logger name: level})

    Raises:
        ConfigurationError: If a directive names an unknown level
    """
    root_level = logging.WARNING
    logger_levels: dict[str, int] = {}

    for directive in log_filter.split(","):
        directive = directive.strip()
        if not directive:
            continue

        if "=" in directive:
            name, _, level = directive.partition("=")
            logger_levels[name.strip()] = _parse_level(level, log_filter)
        else:
            root_level = _parse_level(directive, log_filter)

    return root_level, logger_levels


def configure_logging(log_filter: str) -> None:
    """
    Install the log format and apply the levels from LOG_FILTER.

    An invalid filter does not stop startup: the default filter is applied
    and a warning names the rejected value.
    """
    try:
        root_level, logger_levels = parse_log_filter(log_filter)
        rejected = None
    except ConfigurationError as e:
        root_level, logger_levels = parse_log_filter(DEFAULT_LOG_FILTER)
        rejected = e

    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(root_level)

    for name, level in logger_levels.items():
        logging.getLogger(name).setLevel(level)

    if rejected is not None:
        logger.warning(
            f"{rejected.message}; using LOG_FILTER={DEFAULT_LOG_FILTER!r} instead"
        )
