"""
Per-font verification checks.
"""
