"""Shared fixtures and utilities for unit tests."""

import numpy as np
import pytest

from labelenum import LabelEnum, create_enum

STATUS_LABELS = ("pending", "active", "archived")


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so randomness tests are reproducible."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def status(rng) -> LabelEnum:
    """Three-label enum used across tests."""
    return create_enum(list(STATUS_LABELS), rng=rng)
