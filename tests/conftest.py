"""Shared fixtures."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_ktde_logger():
    """The CLI installs its own handler on the KTDE logger; undo it per test."""
    logger = logging.getLogger("KTDE")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    yield
    logger.handlers[:], logger.level, logger.propagate = saved
