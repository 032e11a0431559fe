"""Configuration loading and path discovery for mbsearch."""
