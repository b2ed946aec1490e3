"""
iparams CLI - Command-line access to a store file.

Commands:
- iparams get <kind> <key> - Print a value (initializing it if missing)
- iparams set <kind> <key> <value> - Store a value
- iparams has <key> [--kind <kind>] - Check whether a key exists
- iparams delete <key> [--kind <kind>] - Delete one kind or every kind of a key
- iparams count - Number of well-formed records
- iparams dump [--json-out] - List records
- iparams clear [--yes] - Delete every record
"""

from .main import cli, main

__all__ = ["cli", "main"]
