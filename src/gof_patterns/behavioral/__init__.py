"""Behavioral patterns - communication idioms between objects."""
