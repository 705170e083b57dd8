"""GraphQL Views - schema fields derived from configured views.

This package turns declarative view definitions into GraphQL field
plugin definitions:
- Entity type definitions (base and data tables)
- GraphQL interface catalogue
- View definitions with their displays
- ViewFieldDeriver, one field per GraphQL display
"""

__version__ = "0.1.0"
