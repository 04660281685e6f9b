# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
In-memory holder for the current style guide configuration.

One ConfigStore is owned by whoever serves requests and is passed to the
handlers explicitly. Configurations are immutable, so readers get a
consistent snapshot without locking; writers serialize through a lock and
the last write wins. Nothing survives a restart.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from styleguide.config.defaults import DEFAULT_CONFIG
from styleguide.schema.config import StyleGuideConfig

logger = logging.getLogger(__name__)


class ConfigStore:
    """Single-writer cell holding a StyleGuideConfig."""

    def __init__(self, initial: Optional[StyleGuideConfig] = None) -> None:
        self._config = initial if initial is not None else DEFAULT_CONFIG
        self._lock = threading.Lock()

    @property
    def current(self) -> StyleGuideConfig:
        """The configuration as of the last write."""
        return self._config

    def replace(self, config: StyleGuideConfig) -> StyleGuideConfig:
        """Swap in a new configuration and return it."""
        with self._lock:
            self._config = config
        logger.info("Configuration replaced: %r (%d palettes)", config.title, len(config.palettes))
        return config

    def update(self, fn: Callable[[StyleGuideConfig], StyleGuideConfig]) -> StyleGuideConfig:
        """
        Derive the next configuration from the current one.

        ``fn`` runs under the write lock, so concurrent updates never
        lose each other's changes.
        """
        with self._lock:
            self._config = fn(self._config)
            config = self._config
        logger.info("Configuration updated: %r", config.title)
        return config

    def reset(self) -> StyleGuideConfig:
        """Restore the default configuration."""
        logger.info("Configuration reset to defaults")
        return self.replace(DEFAULT_CONFIG)
