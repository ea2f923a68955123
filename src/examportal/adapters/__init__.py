"""Adapters (infrastructure) for EXAMPORTAL.

Provide concrete implementations of the application boundary (key-value store
backends, ID generators, presenters, form sources), plus the SQLAlchemy engine
and table definitions the SQL-backed store relies on.

Dependency rule: may import `examportal.interfaces` and `examportal.domain`;
neither of those may import this package.
"""
