"""
Test suite for Algo Toolkit.

This package contains all tests organized by component:
- test_algorithms/: Tests for the pure algorithm functions
- test_services/: Tests for the AlgorithmService facade
- test_utils/: Tests for logging setup
"""
