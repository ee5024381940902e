"""Persistence layer for the notes workbench: engine, models and accessors."""
