"""
Test Suite for Monster Catalog.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end query tests
    - fixtures/: Shared test monsters and sample queries

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
"""
