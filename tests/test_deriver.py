import pytest

from graphql_views.deriver import ViewFieldDeriver
from graphql_views.entities.schemas import EntityTypeDescriptor

from tests.memory import MemoryInterfaces, MemoryViews, make_view

BASE = {"provider": "graphql_views", "secure": True, "parents": ["Root"]}


def test_articles_graphql_display_without_node_interface(make_deriver):
    deriver = make_deriver([make_view("articles", "node", {"graphql_1": "graphql"})])

    fields = deriver.derive_all(BASE)

    assert list(fields) == ["articles-graphql_1"]
    field = fields["articles-graphql_1"]
    assert field["id"] == "articles-graphql_1"
    assert field["name"] == "ArticlesGraphql1View"
    assert field["type"] == "Entity"
    assert field["view"] == "articles"
    assert field["display"] == "graphql_1"


def test_type_uses_registered_interface(make_deriver):
    deriver = make_deriver(
        [make_view("articles", "node", {"graphql_1": "graphql"})],
        interfaces=["Entity", "Node"],
    )

    assert deriver.derive_all(BASE)["articles-graphql_1"]["type"] == "Node"


def test_interface_match_is_exact(make_deriver):
    deriver = make_deriver(
        [make_view("tags", "taxonomy_term_data", {"graphql_1": "graphql"})],
        interfaces=["taxonomyterm", "Taxonomy_term", "TaxonomyTerm "],
    )

    assert not deriver.interface_exists("TaxonomyTerm")
    assert deriver.derive_all(BASE)["tags-graphql_1"]["type"] == "Entity"


def test_unmapped_base_table_yields_nothing(make_deriver):
    deriver = make_deriver(
        [make_view("log", "unmapped_table", {"graphql_1": "graphql", "graphql_2": "graphql"})]
    )

    assert deriver.derive_all(BASE) == {}


def test_view_without_base_table_is_skipped(make_deriver):
    deriver = make_deriver([make_view("broken", None, {"graphql_1": "graphql"})])

    assert deriver.derive_all(BASE) == {}


def test_only_graphql_displays_are_derived(make_deriver):
    deriver = make_deriver(
        [make_view("articles", "node", {"page_1": "page", "graphql_1": "graphql"})]
    )

    assert list(deriver.derive_all(BASE)) == ["articles-graphql_1"]


def test_one_field_per_graphql_display_in_declared_order(make_deriver):
    deriver = make_deriver(
        [
            make_view(
                "articles",
                "node_field_data",
                {"default": "default", "graphql_b": "graphql", "block_1": "block", "graphql_a": "graphql"},
            ),
            make_view("tags", "taxonomy_term_field_data", {"graphql_1": "graphql"}),
            make_view("log", "watchdog", {"graphql_1": "graphql"}),
        ]
    )

    fields = deriver.derive_all(BASE)

    assert list(fields) == ["articles-graphql_b", "articles-graphql_a", "tags-graphql_1"]


def test_custom_display_plugin(make_deriver):
    deriver = make_deriver(
        [make_view("articles", "node", {"graphql_1": "graphql", "rest_1": "rest_export"})],
        display_plugin="rest_export",
    )

    assert list(deriver.derive_all(BASE)) == ["articles-rest_1"]


def test_cache_metadata_is_copied_from_view(make_deriver):
    view = make_view(
        "articles",
        "node",
        {"graphql_1": "graphql"},
        cache_tags=["node_list"],
        cache_contexts=["user.permissions"],
        cache_max_age=300,
    )
    deriver = make_deriver([view])

    field = deriver.derive_all(BASE)["articles-graphql_1"]

    assert field["cache_tags"] == ["config:views.view.articles", "node_list"]
    assert field["cache_contexts"] == ["user.permissions"]
    assert field["cache_max_age"] == 300

    # Copies, not the view's own lists
    field["cache_tags"].append("mutated")
    assert "mutated" not in view.cache_tags


def test_base_definition_is_merged_and_not_mutated(make_deriver):
    deriver = make_deriver([make_view("articles", "node", {"graphql_1": "graphql"})])
    base = {"provider": "graphql_views", "name": "base_name", "id": "view", "multi": True}

    field = deriver.derive_all(base)["articles-graphql_1"]

    assert field["provider"] == "graphql_views"
    assert field["multi"] is True
    # Derived keys win
    assert field["id"] == "articles-graphql_1"
    assert field["name"] == "ArticlesGraphql1View"
    assert base == {"provider": "graphql_views", "name": "base_name", "id": "view", "multi": True}


def test_table_index_is_built_once(make_deriver, entity_types):
    deriver = make_deriver([])

    assert deriver.resolve_entity_type_for_table("node") == "node"
    assert deriver.resolve_entity_type_for_table("node") == "node"
    assert deriver.resolve_entity_type_for_table("taxonomy_term_field_data") == "taxonomy_term"
    assert deriver.resolve_entity_type_for_table("missing") is None
    assert entity_types.calls == 1


def test_table_index_survives_registry_changes(make_deriver, entity_types):
    deriver = make_deriver([])
    assert deriver.resolve_entity_type_for_table("users") is None

    entity_types.descriptors.append(EntityTypeDescriptor(id="user", base_table="users"))

    assert deriver.resolve_entity_type_for_table("users") is None


def test_base_table_wins_over_data_table(make_deriver, entity_types):
    entity_types.descriptors = [
        EntityTypeDescriptor(id="first", base_table="first", data_table="shared"),
        EntityTypeDescriptor(id="second", base_table="shared", data_table="second_data"),
        EntityTypeDescriptor(id="third", base_table="third", data_table="shared"),
    ]
    deriver = make_deriver([])

    # Last write wins: third's data table is recorded after second's base table
    assert deriver.resolve_entity_type_for_table("shared") == "third"


def test_same_table_as_base_and_data(make_deriver, entity_types):
    entity_types.descriptors = [
        EntityTypeDescriptor(id="a", data_table="shared"),
        EntityTypeDescriptor(id="b", base_table="shared", data_table="b_data"),
    ]
    deriver = make_deriver([])

    assert deriver.resolve_entity_type_for_table("shared") == "b"
    assert deriver.resolve_entity_type_for_table("b_data") == "b"


def test_empty_entity_type_id_does_not_resolve(make_deriver, entity_types):
    entity_types.descriptors = [EntityTypeDescriptor(id="", base_table="ghost")]
    deriver = make_deriver([make_view("ghosts", "ghost", {"graphql_1": "graphql"})])

    assert deriver.resolve_entity_type_for_table("ghost") is None
    assert deriver.resolve_entity_type_for_table("") is None
    assert deriver.derive_all(BASE) == {}


def test_name_collision_is_logged(make_deriver, caplog):
    deriver = make_deriver(
        [
            make_view("a_b", "node", {"c": "graphql"}),
            make_view("a", "node", {"b_c": "graphql"}),
        ]
    )

    with caplog.at_level("WARNING", logger="graphql_views.deriver.deriver"):
        fields = deriver.derive_all(BASE)

    assert set(fields) == {"a_b-c", "a-b_c"}
    assert fields["a_b-c"]["name"] == fields["a-b_c"]["name"] == "ABCView"
    assert "ABCView" in caplog.text


def test_derive_one(make_deriver):
    deriver = make_deriver([make_view("articles", "node", {"graphql_1": "graphql"})])

    field = deriver.derive_one("articles-graphql_1", BASE)

    assert field["name"] == "ArticlesGraphql1View"
    assert deriver.derive_one("articles-page_1", BASE) is None


def test_collaborator_errors_propagate(entity_types):
    class BrokenViews:
        def load_all(self):
            raise ConnectionError("view storage unreachable")

    class BrokenEntityTypes:
        def list_descriptors(self):
            raise RuntimeError("registry down")

    deriver = ViewFieldDeriver(entity_types, interfaces=None, views=BrokenViews())
    with pytest.raises(ConnectionError):
        deriver.derive_all(BASE)

    deriver = ViewFieldDeriver(
        BrokenEntityTypes(),
        MemoryInterfaces([]),
        MemoryViews([make_view("articles", "node", {"graphql_1": "graphql"})]),
    )
    with pytest.raises(RuntimeError, match="registry down"):
        deriver.derive_all(BASE)


def test_derive_one_uses_the_given_base_definition(make_deriver):
    deriver = make_deriver([make_view("articles", "node", {"graphql_1": "graphql"})])
    deriver.derive_all({"provider": "first", "multi": True})

    field = deriver.derive_one("articles-graphql_1", {"provider": "second"})

    assert field["provider"] == "second"
    assert "multi" not in field
    assert field["id"] == "articles-graphql_1"
