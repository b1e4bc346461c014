"""signup - User registration with ordered field validation and localized error reports."""

__version__ = "0.1.0"
