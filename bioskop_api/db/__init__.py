"""Database Layer — declarative base shared by ORM models and test fixtures."""
