"""Core: configuration, domain models, errors and pure services.

Nothing in here performs I/O.
"""
