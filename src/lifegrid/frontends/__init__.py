"""Hosts that drive the Life engine."""
