"""Domain layer for helperkit.

Pure helpers and small data holders: arrays, colours, calendars, company
identifiers, phone numbers, vCards, files, form parsing and validation.

Dependency rule: do not import from `helperkit.adapters` or
`helperkit.entrypoints`. Outside services are reached through
`helperkit.interfaces`.
"""
