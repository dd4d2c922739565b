"""Simplified stock exchange: companies, exchanges, operators and price policies."""
