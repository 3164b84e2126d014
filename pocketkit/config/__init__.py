"""
Configuration loading and validation.

Provides strongly typed settings objects for the async helpers and logging,
loaded from environment variables with upfront validation.
"""
