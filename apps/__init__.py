"""Deployable applications."""
