"""
Core App - Record store access and schema setup

Thin layer over the Django ORM that every other app uses to talk to the
relational store: error translation, inclusive date-range queries,
count-only and bulk-delete helpers, and per-table change notifications.
Also ships the one-time SQL schema setup command.
"""
