"""Core infrastructure: settings, logging, security, database and errors."""
