"""
Licenses module - license records and their credential lifecycle.

This module handles:
- LicenseRecord entity and domain services
- Token signing and refresh credential generation
- License lifecycle (create, validate, refresh, update, delete, trial)
- Record persistence (memory, JSON file, database)
"""
