"""Support namespace for cross-cutting, dependency-light helpers.

This package provides a neutral location for small, reusable functions that
would otherwise clutter the string helpers. It is not a new architectural layer.

Scope:
- Small, stateless helpers with no third-party dependencies (e.g., collection
  emptiness checks).
- Prefer pure functions; organize by single-purpose modules (e.g.,
  ``collections.py``) rather than one catch-all file.

Import direction:
- May be imported by any STRINGKIT module.
- Must not import from other STRINGKIT packages.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules to avoid incidental coupling.
"""
