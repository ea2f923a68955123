"""Support namespace for cross-cutting, dependency-light helpers.

This package provides a neutral location for small, reusable functions that
would otherwise clutter feature packages. It is not a new architectural layer.

Scope:
- Small, stateless helpers with minimal dependencies (date/time display,
  timing instrumentation).
- No business rules, no orchestration, no wiring.

Import direction:
- May be imported by any EXAMPORTAL package.
- Must not import from application packages.

Public API:
- Nothing is re-exported at the package level by default. Import specific
  helpers from their defining modules to avoid incidental coupling.
"""
