"""simlogbook/navdata/exceptions.py"""

class NavdataError(Exception):
    """Raised when the navigation database cannot be opened or queried."""
    pass
