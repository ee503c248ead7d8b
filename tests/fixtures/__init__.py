"""Shared builders for professionals and criteria used across the test suite."""
