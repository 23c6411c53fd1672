"""
Unit tests -- RawQuery passes text through untouched.
"""
import pytest

from weaviate_gql.query.raw import RawQuery


@pytest.mark.parametrize(
    "text",
    [
        "{Get{JeopardyQuestion{question answer points}}}",
        "{\n  Get {\n    JeopardyQuestion {\n      question\n    }\n  }\n}\n",
        "",
        "   leading and trailing whitespace   ",
        "not graphql at all \"quotes\" \\ backslash ünïcode",
    ],
)
def test_payload_round_trip(text):
    assert RawQuery.new(text).as_payload() == {"query": text}


def test_render_and_str_are_the_text():
    query = RawQuery.new("{ Get { Article { title } } }")
    assert query.render() == "{ Get { Article { title } } }"
    assert str(query) == query.render()
    assert query.build() is query
