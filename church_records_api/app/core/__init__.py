"""
Core infrastructure: settings, logging, SQLite storage and errors.
"""
