"""
Utility helpers for pb-async: structured logging and operation decorators.
"""
