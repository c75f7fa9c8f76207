"""
Test suite for the cron expression parser.

Test Categories:
- Unit tests: field evaluation, splitting, normalization, summaries
- Integration tests: end-to-end parsing and the command-line interface
- Edge case tests: boundary values and malformed input
"""
