"""Entity type definitions - which storage tables belong to which entity type.

The deriver only needs the base and data table names of each type to map a
view's base table back to its entity type.
"""
