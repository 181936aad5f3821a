"""
Test utilities for rxcore.

This package contains shared testing utilities to help write
better, more maintainable tests.
"""

from .memory_utils import MemoryTracker, assert_no_object_leak, count_types
from .recorder import EventRecorder

__all__ = [
    "assert_no_object_leak",
    "count_types",
    "EventRecorder",
    "MemoryTracker",
]
