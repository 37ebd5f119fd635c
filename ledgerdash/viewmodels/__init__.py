"""ViewModel package for UI state and command surfaces.

Call context:
    ``ledgerdash/web_ui/runtime.py`` builds one viewmodel per dashboard tab and
    ``ledgerdash/web_ui/main.py`` binds NiceGUI widgets to them.

Dependencies:
    Modules in this package depend on domain types, use-case callables and
    lightweight formatting helpers only. Transport stays in the adapters.

Responsibilities:
    - Expose mutable form state and async command methods.
    - Own one ``AsyncOperation`` per backend operation.
    - Transform typed results into view-facing labels and rows.
"""
