"""Storm Analytics: health and economic harm of US storm events, 1950-2011."""
__version__ = "1.0.0"
