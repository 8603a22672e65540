"""
Pytest configuration for cregions tests.
"""
import pytest

from cregions.profiling import enable_profiling, is_profiling_enabled, reset_profile


@pytest.fixture
def profiling_enabled():
    """Record profile events for the duration of one test."""
    was_enabled = is_profiling_enabled()
    reset_profile()
    enable_profiling(True)
    yield
    enable_profiling(was_enabled)
    reset_profile()
