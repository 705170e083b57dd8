"""GraphQL interface catalogue - candidate return types for view fields."""
