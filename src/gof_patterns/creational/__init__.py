"""Creational patterns - object-creation indirection."""
