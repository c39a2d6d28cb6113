"""Exception classes for modeline.

Scanning user documents never raises: malformed or unknown options are
skipped. These exceptions cover misuse of the option table API instead.
"""

from __future__ import annotations


class ModelineError(Exception):
    """Base exception for all modeline errors.
    
    Subclass this for specific error categories.
    """

    pass


class OptionTableError(ModelineError):
    """Error when building an option table.
    
    Raised when an option has no name, or when its name or alias
    collides with an option that is already registered.
    """

    def __init__(self, option_name: str, message: str) -> None:
        """Initialize option table error.
        
        Args:
            option_name: Canonical name of the offending option
            message: Description of the problem
        """
        self.option_name = option_name
        super().__init__(f"Option '{option_name}': {message}")
