"""Test suite for beatshow.

Test Structure:
- unit/: Unit tests for individual components
  - lightshow/: Filters, distributions, event-box families and documents
  - config/: Engine configuration loading
  - utils/: Utility function tests
- conftest.py: Shared fixtures and test configuration
"""
