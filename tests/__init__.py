"""Test package for the SGF diagram tools.

This package contains all test modules organized by test type:
- unit/: Unit tests for the diagram pipeline and its front ends
- components/: Component tests for board, moves, labels and SGF input
- integration/: Integration tests
- e2e/: End-to-end tests
- performance/: Performance tests
"""
