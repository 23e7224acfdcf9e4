"""
Centralized test credentials.

Loaded from environment variables when available, with clearly
non-production placeholders as fallbacks.
"""

from __future__ import annotations

import os

TEST_INTERNAL_JOB_TOKEN = os.environ.get("TEST_INTERNAL_JOB_TOKEN") or "test-internal-token"
TEST_OPERATOR_ID = "operator-1"
