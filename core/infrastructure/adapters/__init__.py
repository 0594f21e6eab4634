"""Notification and other outbound adapters."""
