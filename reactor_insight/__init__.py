"""Relationship and execution-order analysis for Reactor properties."""
