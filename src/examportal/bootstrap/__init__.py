"""Bootstrap (composition root) for EXAMPORTAL.

Assembles the application at runtime: picks a key-value store backend from
configuration, wires it with an ID generator and a presenter into the session,
result, registration and validation services, and hands them to entrypoints
as one `AppContainer`.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain
  directly for wiring).
- This package may import: `examportal.adapters`, `examportal.service_layer`,
  `examportal.interfaces`, `examportal.domain`, and `examportal.config`.
- Inner layers must not import `examportal.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from examportal.adapters.form_sources import MappingFormSource

from .bootstrap import AppContainer, bootstrap, build_store

__all__ = ["AppContainer", "MappingFormSource", "bootstrap", "build_store"]
