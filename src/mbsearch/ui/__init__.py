"""User interfaces for mbsearch."""
