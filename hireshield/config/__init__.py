"""Reference tables, file loader and environment settings."""
