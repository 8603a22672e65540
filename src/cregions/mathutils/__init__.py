"""Numeric helpers for complex-plane geometry."""
