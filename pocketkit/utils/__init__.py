"""
Generic utility functions shared across modules.

Includes time/clock abstractions, mathematical and statistical helpers,
logging setup and small base helpers.
"""
