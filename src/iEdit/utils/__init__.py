"""Utility helpers for iEdit."""
