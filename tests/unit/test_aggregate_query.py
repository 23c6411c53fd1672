"""
Unit tests -- AggregateQuery: body layout, clause order, near locators.
"""
import pytest

from weaviate_gql.core.errors import ConflictingClauseError, MissingRequiredFieldError
from weaviate_gql.query.aggregate import AggregateQuery


def test_meta_count_fields_limit_golden():
    query = (
        AggregateQuery.new("Article")
        .with_meta_count()
        .with_fields(["wordCount { count }"])
        .with_limit(10)
    )
    assert query.render() == (
        "{\n"
        "  Aggregate {\n"
        "    Article\n"
        "    (\n"
        "      limit: 10\n"
        "    )\n"
        "    {\n"
        "      meta { count }\n"
        "      wordCount { count }\n"
        "    }\n"
        "  }\n"
        "}"
    )


def test_fields_joined_on_one_line_in_order():
    query = AggregateQuery.new("Article", ["wordCount { mean }"]).with_fields(["inPublication { pointingTo }"])
    assert "      wordCount { mean } inPublication { pointingTo }\n" in query.render()


def test_meta_count_only():
    text = AggregateQuery.new("Article").with_meta_count().render()
    assert "    {\n      meta { count }\n    }" in text
    assert "(" not in text


def test_empty_body():
    assert AggregateQuery.new("Article").render() == (
        "{\n"
        "  Aggregate {\n"
        "    Article\n"
        "    {\n"
        "    }\n"
        "  }\n"
        "}"
    )


def test_clause_order():
    query = (
        AggregateQuery.new("Article")
        .with_limit(3)
        .with_tenant("tenantA")
        .with_object_limit(100)
        .with_near_text("{concepts: [\"fashion\"], distance: 0.7}")
        .with_group_by("[\"inPublication\"]")
        .with_where("{path: [\"wordCount\"], operator: GreaterThan, valueInt: 1000}")
    )
    names = [line.split(":", 1)[0] for line in query.clauses()]
    assert names == ["where", "groupBy", "nearText", "objectLimit", "tenant", "limit"]


def test_clause_order_independent_of_call_order():
    a = AggregateQuery.new("Article").with_limit(1).with_group_by("[\"x\"]")
    b = AggregateQuery.new("Article").with_group_by("[\"x\"]").with_limit(1)
    assert a.render() == b.render()


def test_near_rendered_with_locator_name():
    text = AggregateQuery.new("Article").with_near_vector("{vector: [0.1, 0.2]}").with_object_limit(5).render()
    assert "      nearVector: {vector: [0.1, 0.2]}\n      objectLimit: 5\n" in text


def test_group_by_with_grouped_by_field():
    text = (
        AggregateQuery.new("Article")
        .with_group_by("[\"inPublication\"]")
        .with_fields(["groupedBy {value path}"])
        .render()
    )
    assert '      groupBy: ["inPublication"]\n' in text
    assert "      groupedBy {value path}\n" in text


def test_tenant_passed_through():
    text = AggregateQuery.new("Article").with_tenant('"tenantA"').render()
    assert '      tenant: "tenantA"\n' in text


def test_conflicting_near_rejected():
    query = AggregateQuery.new("Article").with_near_object("{id: \"abc\"}")
    with pytest.raises(ConflictingClauseError):
        query.with_near_image("{image: \"...\"}")


def test_meta_count_does_not_mutate_receiver():
    base = AggregateQuery.new("Article")
    counted = base.with_meta_count()
    assert base.meta_count is False
    assert counted.meta_count is True


def test_as_payload():
    query = AggregateQuery.new("Article").with_meta_count()
    assert query.as_payload() == {"query": query.render()}


def test_empty_class_name_fails():
    with pytest.raises(MissingRequiredFieldError):
        AggregateQuery.new("").build()
