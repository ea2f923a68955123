"""Entrypoints (inbound adapters) for EXAMPORTAL.

Expose the application to the outside world: currently the command-line
interface. Parse and validate inputs, call the services assembled by
`examportal.bootstrap`, and present results.

Dependency rule: may import `examportal.bootstrap`, `examportal.service_layer`
and `examportal.domain`; avoid importing `examportal.adapters` directly.
"""
