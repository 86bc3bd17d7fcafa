"""
Integration Tests - End-to-End Query Tests.

These tests verify that decoding, configuration, filtering and sorting
work together on the reference monsters.

Test Files:
    - test_monster_query.py: Full query workflow
"""
