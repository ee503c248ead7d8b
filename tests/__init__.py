#!/usr/bin/env python3
"""
Test suite configuration.

All tests are pure unit tests (the engine does no I/O) and run with
standard Python tools:

    # Run all tests
    uv run python -m pytest tests/ -v

    # Using unittest
    uv run python -m unittest discover tests -v
"""
