"""Use-case layer for orchestrating dashboard workflows.

Each module validates user input and calls one ledger port operation without
performing transport I/O directly, preserving MVVM + Hexagonal boundaries.
"""
