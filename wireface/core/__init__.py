"""Internal implementation package for wireface.

Modules here may change; import public symbols from ``wireface`` instead.
"""
