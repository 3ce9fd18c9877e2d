"""helperkit

A federation of small, independent helpers: list and row manipulation,
colour conversion, phone numbers and vCards, date/time utilities, file
helpers, French company identifiers, VAT numbers, password strength,
reCAPTCHA verification and a lightweight constraint validator.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
