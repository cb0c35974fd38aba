"""
Utilities Package - logging and other app-wide helpers.
"""
