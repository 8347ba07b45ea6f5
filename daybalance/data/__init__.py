"""Loading and exporting journal data."""

from daybalance.data.loader import EntryFileError, dump_insights, load_entries

__all__ = ["EntryFileError", "dump_insights", "load_entries"]
