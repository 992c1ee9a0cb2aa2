"""
Exit Codes - Process exit statuses for the mydhl command.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes returned by main()."""
    
    SUCCESS = 0
    ERROR = 1
    CONFIG_ERROR = 2
    VALIDATION_ERROR = 3
    API_ERROR = 4
