"""Service layer for EXAMPORTAL.

Implements the portal's use-cases on top of the application boundary: the
session guard, the append-only result and registration logs, and form
validation. Everything here talks to storage only through a
``KeyValueStore`` and to the user only through a ``Presenter``.

Dependency rule: may import `examportal.domain` and `examportal.interfaces`,
but not `examportal.adapters` or `examportal.entrypoints`.
"""
