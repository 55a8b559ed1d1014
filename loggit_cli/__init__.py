"""
loggit CLI - terminal time logging
"""

__version__ = "0.1.0"
