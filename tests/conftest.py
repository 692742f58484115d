"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

from modarith import BIGINT, I8, I32, I64, I128, U8, U32, U64, U128

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture(params=[I8, I32, I64, I128, U8, U32, U64, U128, BIGINT], ids=lambda k: k.name)
def integer_type(request):
    """Each integer type the operations are exercised against."""
    return request.param


@pytest.fixture
def residue_mod_11():
    """Provide the residue 5 modulo 11."""
    from modarith import Residue

    return Residue(5, 11)


@pytest.fixture
def sample_moduli():
    """Provide a set of interesting moduli."""
    return [
        1,
        2,
        7,
        11,
        13,
        100,  # Composite
        127,  # Largest i8 value
        255,  # Largest u8 value
        2**31 - 1,
    ]
