"""
Shared Test Data.

    - monsters.py: Reference monsters and the Alarm document
    - sample_query.yaml: Query config used by loader and integration tests
    - profiles/: Query profiles narrowing sample_query.yaml
"""
