"""Fetchers for the market-data page and the exchange ticker."""
