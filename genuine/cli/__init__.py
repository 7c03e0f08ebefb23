"""
genuine CLI - compile and try route patterns from the shell.

Usage:
    genuine check <pattern>...
    genuine match <pattern> <path>...
"""

__version__ = "0.1.0"
__cli_name__ = "genuine"
