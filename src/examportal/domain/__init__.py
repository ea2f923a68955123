"""Domain layer for EXAMPORTAL.

Holds the record types (users, test results, registrations, statistics) and
the domain error hierarchy. Nothing in here performs I/O.

Dependency rule: the domain must not import from `examportal.adapters`,
`examportal.service_layer` or `examportal.bootstrap`.
"""
