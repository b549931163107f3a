"""Command line wrappers for :mod:`peybot`."""
