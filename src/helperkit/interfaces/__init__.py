"""Interfaces (application boundary) for helperkit.

Framework-free contracts implemented by adapters: redactors,
VAT registries and captcha verifiers.

Dependency rule: this package is independent; do not import from any
`helperkit.*` modules.
"""
