"""View definitions - declarative listings of entities and their displays.

A ViewDefinition declares: this base table -> these displays. Displays of
the GraphQL kind are turned into schema fields by the deriver.
"""
