"""Unit test fixtures.

Most fixtures live in the root conftest.py since they are shared between
unit and integration tests. This file exists for organizational clarity and
any unit-specific fixtures that may be added in the future.
"""
