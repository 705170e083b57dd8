"""View field deriver - one GraphQL field definition per GraphQL display."""

from .deriver import ViewFieldDeriver, get_view_field_deriver, reset_view_field_deriver
from .schemas import DerivedFieldDefinition

__all__ = [
    "DerivedFieldDefinition",
    "ViewFieldDeriver",
    "get_view_field_deriver",
    "reset_view_field_deriver",
]
