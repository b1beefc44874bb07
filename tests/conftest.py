"""Pytest configuration and fixtures.

Provides the hypothesis profile and logging capture for domainkit tests.
"""

from __future__ import annotations

import logging

from hypothesis import settings as hypothesis_settings
import pytest

# Property tests stay deterministic so failures reproduce across runs.
hypothesis_settings.register_profile("domainkit", deadline=None, derandomize=True)
hypothesis_settings.load_profile("domainkit")

# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def domainkit_debug_logs(caplog):
    """Capture DEBUG records from the domainkit logger (not autouse)."""
    caplog.set_level(logging.DEBUG, logger="domainkit")
    return caplog
