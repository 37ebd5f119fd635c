"""Adapter package for external I/O implementations.

Purpose:
    Collect the concrete ``LedgerPort`` implementation and the HTTP transport
    it is built on.

Dependencies:
    Submodules depend on ``requests`` and the domain protocol definitions.

Call context:
    Imported by ``ledgerdash.app.controller`` for runtime wiring and by tests
    for transport-level behavior verification.
"""
