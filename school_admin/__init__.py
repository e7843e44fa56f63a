"""School administration backend: academic years, fees and transportation."""

__version__ = "1.0.0"
