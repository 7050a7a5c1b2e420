"""Shared CLI constants."""

VALIDATION_EXIT_CODE = 2
FETCH_ERROR_EXIT_CODE = 1
