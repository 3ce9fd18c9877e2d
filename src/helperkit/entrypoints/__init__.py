"""Entrypoints (inbound adapters) for helperkit.

Expose the helpers to the outside world through the ``helperkit`` command.
Parse and validate inputs, call the domain helpers, and present results.

Dependency rule: may import `helperkit.domain` and `helperkit.adapters`;
nothing else in the package imports from here.
"""
