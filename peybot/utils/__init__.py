"""Shared helpers for :mod:`peybot`."""
