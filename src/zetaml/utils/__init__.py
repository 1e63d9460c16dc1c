"""Utilities around the core types: configuration, conversions,
formatting, geometry helpers and logging setup.
"""
