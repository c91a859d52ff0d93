"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure may use core/ types (errors, results, rules) but core never
      imports infrastructure
    - All SQL goes through SQLAlchemy expressions (bound parameters only)
"""
