"""
Unit Tests - Testing Individual Components in Isolation.

Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_entities.py: Labels and record accessors
    - test_decoding.py: Document decoding and encoding
    - test_filtering.py: Filter engine
    - test_predicates.py: Predicate catalog
    - test_sorting.py: Sort engine, stability and direction
    - test_comparators.py: Comparator catalog and derived metrics
    - test_config_loader.py: Query loading, profiles, validation
    - test_package.py: Package exports and import order
"""
