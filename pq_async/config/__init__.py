"""
Configuration loading and validation for numeric formatting and logging.

Provides strongly typed settings objects read from environment variables
(and an optional .env file) with upfront validation.
"""
