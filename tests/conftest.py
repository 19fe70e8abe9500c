"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def calculator():
    """Provide a fresh Calculator instance."""
    from bigcalc import Calculator

    return Calculator()


@pytest.fixture
def sample_numbers():
    """Provide a set of interesting decimal strings."""
    return [
        "0",
        "1",
        "-1",
        "9",
        "10",
        "-10",
        "99999999999999999999",
        "-100000000000000000000",
        "123456789012345678901234567890",
        "000042",  # Leading zeros
        "-0",  # Negative zero
    ]
