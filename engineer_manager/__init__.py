"""Engineer Manager - paginated, searchable engineer records with a date-named rotating log."""

__version__ = "0.1.0"
