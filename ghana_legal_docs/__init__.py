"""Ghanaian tenancy and vehicle transfer agreement generator"""

__version__ = "0.1.0"
