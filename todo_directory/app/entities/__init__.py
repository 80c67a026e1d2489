"""Entities module with entity-centric structure."""
