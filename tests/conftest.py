import pytest

from graphql_views.deriver import ViewFieldDeriver
from graphql_views.entities.schemas import EntityTypeDescriptor

from tests.memory import MemoryEntityTypes, MemoryInterfaces, MemoryViews


@pytest.fixture
def entity_types():
    return MemoryEntityTypes(
        [
            EntityTypeDescriptor(id="node", base_table="node", data_table="node_field_data"),
            EntityTypeDescriptor(
                id="taxonomy_term",
                base_table="taxonomy_term_data",
                data_table="taxonomy_term_field_data",
            ),
            EntityTypeDescriptor(id="contact_message"),
        ]
    )


@pytest.fixture
def make_deriver(entity_types):
    def _make(views, interfaces=(), **kwargs):
        return ViewFieldDeriver(
            entity_types=entity_types,
            interfaces=MemoryInterfaces(interfaces),
            views=MemoryViews(views),
            **kwargs,
        )

    return _make
