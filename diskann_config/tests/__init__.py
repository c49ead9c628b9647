"""
Tests Module: Unit Tests

Test Coverage:
    - Core types, errors, settings and logging
    - Schema declarations and range predicates
    - Configuration record and base loader
    - Phase validators and dispatch
"""
