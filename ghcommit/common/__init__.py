"""Small helpers shared across ghcommit modules."""
