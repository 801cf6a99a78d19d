"""Test suite for tidewave.

Test Structure:
- unit/: Unit tests for individual components
  - waves/: Pattern, grammar, sampling and interlock tests
  - motion/: Keyframe and scroll tracker tests
  - config/: Settings models and file loading
  - utils/: Logging, math and JSON helpers
- conftest.py: Shared fixtures and test configuration
"""
