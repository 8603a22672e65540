"""
cregions Profiling Package

Lightweight profiling markers for the intersection and winding code:

    from cregions.profiling import profile, perf_marker, enable_profiling

    enable_profiling()

    @profile
    def my_function():
        with perf_marker("my_section"):
            ...
"""

from .profile import (
    enable_profiling,
    is_profiling_enabled,
    reset_profile,
    get_profile_results,
    perf_marker,
    profile,
    _PROFILING_COMPILED_OUT,
)

__all__ = [
    'enable_profiling',
    'is_profiling_enabled',
    'reset_profile',
    'get_profile_results',
    'perf_marker',
    'profile',
    '_PROFILING_COMPILED_OUT',
]
