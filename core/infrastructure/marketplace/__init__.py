"""Marketplace integrations."""
