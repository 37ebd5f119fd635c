"""Application composition layer.

The controller wires the ledger adapter and use cases from settings so the
web runtime never constructs transport objects itself.
"""
