"""
Shared settings and logging helpers.
"""
