"""Utility functions and classes for namedparams."""
