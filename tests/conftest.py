"""Pytest configuration for the msgformat test suite.

Hypothesis profiles (max_examples is set here and nowhere else):
    dev      500 examples, random seed (local default)
    ci       50 examples, derandomized (CI=true)
    verbose  100 examples with progress output

HYPOTHESIS_PROFILE overrides the detected profile.

Tests marked @pytest.mark.fuzz walk whole generated message trees and only
run with: pytest -m fuzz
"""

import os

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

from msgformat.runtime.locale_context import LocaleContext

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

# Compile fixtures are cheap and stateless; reuse across examples is intended
_HEALTH = [HealthCheck.function_scoped_fixture]

settings.register_profile(
    "dev", max_examples=500, phases=_PHASES, suppress_health_check=_HEALTH
)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
    suppress_health_check=_HEALTH,
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
    suppress_health_check=_HEALTH,
)


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """HYPOTHESIS_PROFILE if valid, else "ci" under CI=true, else "dev"."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED STATE
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_locale_cache() -> None:
    """Start every test with an empty LocaleContext cache."""
    LocaleContext.clear_cache()


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
