"""Unit tests for API components.

This package contains isolated unit tests for:
- The session store and dependency injection
- Error handling
"""
