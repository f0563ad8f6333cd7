"""Tests for answer rendering."""

import pytest

from topictalk.core.constants import IDK, NO_ANSWER
from topictalk.du.query import Query, Question
from topictalk.graph.direction import Direction
from topictalk.nlg.renderer import AnswerRenderer, join_and, upper_first


@pytest.mark.parametrize(
    "items, expected",
    [
        ([], ""),
        (["A"], "A"),
        (["A", "B"], "A and B"),
        (["A", "B", "C"], "A, B, and C"),
        (["A", "B", "C", "D"], "A, B, C, and D"),
    ],
)
def test_join_and(items, expected):
    assert join_and(items) == expected


def test_upper_first():
    assert upper_first("north") == "North"
    assert upper_first("") == ""


def query(graph, topic, question=None, direction=None):
    return Query(topic=graph.get_feature(topic), question=question, direction=direction)


class TestSayAbout:
    """Tests for the default description of a topic."""

    def test_speaks_then_relations(self, city_graph):
        renderer = AnswerRenderer(city_graph)
        assert renderer.say_about(city_graph.get_feature("Paris")) == [
            "Paris is the capital of France.",
            "It sits on the Seine.",
            "Paris contains Louvre.",
        ]

    def test_falls_back_to_name(self, city_graph):
        renderer = AnswerRenderer(city_graph)
        assert renderer.say_about(city_graph.get_feature("Seine")) == ["Seine"]

    def test_relations_use_it_after_first(self, compass_graph):
        renderer = AnswerRenderer(compass_graph)
        assert renderer.speak_neighbor_relations(compass_graph.get_feature("Square")) == [
            "Square is south of Church.",
            "It is south of Market.",
            "It is northeast of Fountain.",
        ]

    def test_event_relations_read_from_topic_side(self, games_graph):
        renderer = AnswerRenderer(games_graph)
        assert renderer.say_about(games_graph.get_feature("City")) == ["City hosted Olympics."]
        assert renderer.say_about(games_graph.get_feature("Olympics")) == [
            "Olympics was hosted at City."
        ]

    def test_non_directional_relations_are_skipped(self, games_graph):
        renderer = AnswerRenderer(games_graph)
        assert renderer.find_directional_neighbors(games_graph.get_feature("Alice")) == []


class TestRenderWhat:
    """Tests for WHAT questions."""

    def test_without_direction_says_about(self, city_graph):
        renderer = AnswerRenderer(city_graph)
        lines = renderer.render(query(city_graph, "Louvre", Question.WHAT))
        assert lines == ["The Louvre is a museum.", "Louvre is inside Paris."]

    def test_direction_singular(self, city_graph):
        renderer = AnswerRenderer(city_graph)
        lines = renderer.render(query(city_graph, "Paris", Question.WHAT, Direction.INSIDE))
        assert lines == ["Inside of Paris is Louvre"]

    def test_direction_plural(self, compass_graph):
        renderer = AnswerRenderer(compass_graph)
        lines = renderer.render(query(compass_graph, "Square", Question.WHAT, Direction.NORTH))
        assert lines == ["North of Square are Church and Market"]

    def test_direction_without_neighbors_is_idk(self, compass_graph):
        renderer = AnswerRenderer(compass_graph)
        lines = renderer.render(query(compass_graph, "Square", Question.WHAT, Direction.EAST))
        assert lines == [IDK]

    def test_hosted(self, games_graph):
        renderer = AnswerRenderer(games_graph)
        lines = renderer.render(query(games_graph, "City", Question.WHAT, Direction.HOSTED))
        assert lines == ["City hosted Olympics."]

    def test_hosted_without_neighbors_is_idk(self, games_graph):
        renderer = AnswerRenderer(games_graph)
        lines = renderer.render(query(games_graph, "Alice", Question.WHAT, Direction.HOSTED))
        assert lines == [IDK]


class TestRenderWon:
    """Tests for winner inference."""

    def test_direct_winner_edge(self, games_graph):
        renderer = AnswerRenderer(games_graph)
        lines = renderer.render(query(games_graph, "Games", Question.WHAT, Direction.WON))
        assert lines == ["Games won Alice."]

    def test_two_hop_inference(self, games_graph):
        """Alice has no won edges, but Games points back at her with one."""
        renderer = AnswerRenderer(games_graph)
        lines = renderer.render(query(games_graph, "Alice", Question.WHAT, Direction.WON))
        assert lines == ["Games won Alice."]

    def test_multiple_winners_joined(self, games_graph):
        games_graph.add_feature("Bob")
        games_graph.add_edge("Games", "Bob", "won")
        renderer = AnswerRenderer(games_graph)
        lines = renderer.render(query(games_graph, "Games", Question.WHAT, Direction.WON))
        assert lines == ["Games won Alice and Bob."]

    def test_no_winner_anywhere(self, city_graph):
        renderer = AnswerRenderer(city_graph)
        lines = renderer.render(query(city_graph, "Paris", Question.WHAT, Direction.WON))
        assert lines == [IDK]


class TestRenderWhere:
    """Tests for WHERE questions."""

    def test_was_hosted_at(self, games_graph):
        renderer = AnswerRenderer(games_graph)
        lines = renderer.render(
            query(games_graph, "Olympics", Question.WHERE, Direction.WAS_HOSTED_AT)
        )
        assert lines == ["Olympics was hosted at City."]

    def test_was_hosted_at_matches_spaced_relation(self, games_graph):
        games_graph.add_feature("Expo")
        games_graph.add_edge("Expo", "City", "was hosted at")
        renderer = AnswerRenderer(games_graph)
        lines = renderer.render(query(games_graph, "Expo", Question.WHERE, Direction.WAS_HOSTED_AT))
        assert lines == ["Expo was hosted at City."]

    def test_where_uses_inverted_directions(self, compass_graph):
        renderer = AnswerRenderer(compass_graph)
        lines = renderer.render(query(compass_graph, "Square", Question.WHERE))
        assert lines[0] == "Square is south of Church."

    def test_where_without_neighbors_is_idk(self, city_graph):
        renderer = AnswerRenderer(city_graph)
        assert renderer.render(query(city_graph, "Seine", Question.WHERE)) == [IDK]


class TestRenderFallbacks:
    """Tests for statements, WHEN and missing queries."""

    def test_statement_says_about(self, city_graph):
        renderer = AnswerRenderer(city_graph)
        assert renderer.render(query(city_graph, "Seine")) == ["Seine"]

    def test_when_renders_nothing(self, city_graph):
        renderer = AnswerRenderer(city_graph)
        assert renderer.render(query(city_graph, "Paris", Question.WHEN)) == [IDK]

    def test_none_query(self, city_graph):
        assert AnswerRenderer(city_graph).render(None) == [NO_ANSWER]

    def test_custom_messages(self, city_graph):
        renderer = AnswerRenderer(city_graph, idk="No idea.", no_answer="Eh?")
        assert renderer.render(query(city_graph, "Paris", Question.WHEN)) == ["No idea."]
        assert renderer.render(None) == ["Eh?"]

    def test_find_neighbors_by_relation_empty_matches_all(self, games_graph):
        renderer = AnswerRenderer(games_graph)
        assert renderer.find_neighbors_by_relation(games_graph.get_feature("Alice"), "") == [
            "Games"
        ]
