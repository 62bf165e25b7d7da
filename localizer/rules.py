"""
Deterministic lookup rules.

This file exists to make the fallback chain explicit and enforceable.
"""

# Tried in order after a direct miss.
LOOKUP_SUFFIXES = (".TEXT", ".ERROR")

MISSING_KEY_TEMPLATE = "[{key}]"
