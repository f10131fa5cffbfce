"""Integration test fixtures.

These tests drive a machine the way an application does: states request
transitions from their own hooks and a loop keeps calling update().
Shared fixtures are inherited from the root conftest.py.
"""
