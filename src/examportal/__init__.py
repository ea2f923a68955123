"""EXAMPORTAL

The data layer of a small exam portal: a client-trusted user session, an
append-only log of test results, an append-only log of test registrations and
form validation, all persisted as JSON values in a key-value store.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
