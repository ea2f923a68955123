"""Interfaces (application boundary) for EXAMPORTAL.

Defines framework-free application contracts: ABCs and small DTOs shared by
the service layer and adapters (key-value stores, ID generators, presenters,
form sources). Business rules stay out of this package.

Dependency rule: this package is independent, do not import from any
`examportal.*` modules. It may be imported by `examportal.service_layer`,
`examportal.adapters`, and `examportal.bootstrap`.
"""
