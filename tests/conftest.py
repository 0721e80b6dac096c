"""Shared pytest fixtures for Jupiter design system tests."""

import pytest

from jupiter_design import VibeColors
from jupiter_design.themes import JupiterColors, LlasiColors


@pytest.fixture
def vibe_colors() -> VibeColors:
    """Return the default Water & Wellness provider."""
    return VibeColors()


@pytest.fixture
def purple_colors() -> VibeColors:
    """Return a Vibe provider with a purple primary color."""
    return VibeColors.with_overrides(primary="purple-600")


@pytest.fixture
def jupiter_colors() -> JupiterColors:
    """Return the Jupiter Software provider (publishes hex values)."""
    return JupiterColors()


@pytest.fixture
def llasi_colors() -> LlasiColors:
    """Return the LLASI provider."""
    return LlasiColors()
