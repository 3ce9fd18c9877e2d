"""Adapters (infrastructure) for helperkit.

Concrete implementations that talk to the outside world: the VIES and
reCAPTCHA HTTP clients, the JSON file store, the subprocess-backed command
runner and the regex redactor.

Dependency rule: may import `helperkit.domain` and `helperkit.interfaces`;
the domain must not import this package.
"""
