# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Logging configuration for processes embedding the provider."""

from __future__ import annotations

import logging
import os
import sys

ENV_LOG_LEVEL = "VAULT_PROVIDER_LOG_LEVEL"

VALID_LOG_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the provider.

    The level comes from the argument, then VAULT_PROVIDER_LOG_LEVEL, then
    INFO. An invalid level falls back to INFO with a notice on stderr.

    Structured Logging Extras:
        Provider log calls attach structured extras such as secret_path,
        correlation_id and error_type. Secret values are never logged.

    Example:
        >>> configure_logging()
        >>> logger.info("Provider configured", extra={"url": config.url})
    """
    log_level = (level or os.getenv(ENV_LOG_LEVEL, "INFO")).upper()

    if log_level not in VALID_LOG_LEVELS:
        print(
            f"Warning: Invalid {ENV_LOG_LEVEL} '{log_level}', using INFO. "
            f"Valid levels: {', '.join(sorted(VALID_LOG_LEVELS))}",
            file=sys.stderr,
        )
        log_level = "INFO"

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


__all__: list[str] = ["ENV_LOG_LEVEL", "VALID_LOG_LEVELS", "configure_logging"]
