"""Utility helpers for the viewfinder CLI."""
