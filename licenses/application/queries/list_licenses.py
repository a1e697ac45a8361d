"""
ListLicensesQuery.

Query to dump every license record.
"""
from dataclasses import dataclass


@dataclass
class ListLicensesQuery:
    """Query to list all licenses."""
