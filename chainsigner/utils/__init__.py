"""Encoding and validation helpers for chainsigner."""
