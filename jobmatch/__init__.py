"""Compatibility ranking between jobseekers and job postings."""

__version__ = "0.1.0"
