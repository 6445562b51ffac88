"""Pay periods and role-based permissions for construction-management apps."""

__version__ = "0.1.0"
