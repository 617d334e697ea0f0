"""Test fixtures for the range editor.

This package provides reusable test fixtures:
- ranges: Range states, configs and editing sessions
- api: TestClient wired to a fresh session store
"""
