"""The ``helperkit`` command and its subcommand groups."""
