"""Infrastructure package - cross-cutting concerns shared by all pattern modules."""
