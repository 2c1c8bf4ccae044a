"""Structural patterns - object composition idioms."""
