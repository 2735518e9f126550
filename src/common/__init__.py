"""Generic shared utilities module.

This module contains generic, domain-agnostic utilities:
- Logging helpers
- CLI argument helpers
- File, JSON and YAML I/O
"""
