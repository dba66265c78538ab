"""Kernel – shared error hierarchy and label collation."""
