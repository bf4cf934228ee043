"""Repackage an AAR/JAR library into a zipped Maven repository layout."""

__version__ = "1.0.0"
