"""crud-scaffold: boilerplate generator for CRUD admin views."""

__version__ = "0.1.0"
