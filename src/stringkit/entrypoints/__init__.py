"""Entrypoints (inbound adapters) for STRINGKIT.

Expose the string helpers to the outside world, currently only as CLI commands.
Parse and validate inputs, call into `stringkit.string_utils`, and present results.

Dependency rule: may import any `stringkit` module; nothing imports from here.
"""
