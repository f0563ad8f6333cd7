"""Tests for the feature graph arena."""

from unittest.mock import patch

import pytest

from topictalk.core.errors import GraphError
from topictalk.graph.direction import Direction
from topictalk.graph.feature import Edge, FeatureGraph


class TestFeatureGraph:
    """Tests for FeatureGraph construction and lookup."""

    def test_first_feature_becomes_root(self, city_graph):
        assert city_graph.root.name == "Paris"

    def test_set_root(self, city_graph):
        city_graph.set_root("Seine")
        assert city_graph.root.name == "Seine"

    def test_empty_graph_has_no_root(self):
        with pytest.raises(GraphError, match="no features"):
            FeatureGraph().root

    def test_duplicate_feature_rejected(self, city_graph):
        with pytest.raises(GraphError, match="Duplicate"):
            city_graph.add_feature("Paris")

    def test_lookup_is_case_sensitive(self, city_graph):
        assert city_graph.find_feature("paris") is None
        assert city_graph.get_feature("Paris").name == "Paris"
        with pytest.raises(GraphError, match="Unknown feature"):
            city_graph.get_feature("paris")

    def test_indexes_follow_insertion_order(self, city_graph):
        assert city_graph.get_feature_names() == ["Paris", "Louvre", "Seine"]
        assert city_graph.get_feature_index("Seine") == 2
        assert city_graph.feature_at(1).name == "Louvre"

    def test_feature_at_out_of_range(self, city_graph):
        with pytest.raises(GraphError):
            city_graph.feature_at(3)

    def test_edges_store_indexes_and_directions(self, city_graph):
        paris = city_graph.get_feature("Paris")
        assert paris.edges == [Edge(target=1, relation="inside", direction=Direction.INSIDE)]

    def test_edge_to_unknown_feature_rejected(self, city_graph):
        with pytest.raises(GraphError):
            city_graph.add_edge("Paris", "Lyon", "south")

    def test_cycles_are_traversable(self, city_graph):
        """Paris and Louvre point at each other; neighbor resolution just follows indexes."""
        paris = city_graph.get_feature("Paris")
        louvre, _ = city_graph.neighbors(paris)[0]
        back, edge = city_graph.neighbors(louvre)[0]
        assert back is paris
        assert edge.direction is Direction.CONTAIN

    def test_container_protocol(self, city_graph):
        assert "Louvre" in city_graph
        assert "Lyon" not in city_graph
        assert len(city_graph) == 3
        assert [f.name for f in city_graph] == ["Paris", "Louvre", "Seine"]


class TestDiscussedAmount:
    """Tests for the only mutation the dialogue core performs."""

    def test_mark_discussed_increments(self, city_graph):
        seine = city_graph.get_feature("Seine")
        assert city_graph.mark_discussed(seine) == 1
        assert city_graph.mark_discussed(seine) == 2
        assert seine.discussed_amount == 2

    def test_negative_amount_rejected(self, city_graph):
        with pytest.raises(GraphError, match="negative"):
            city_graph.set_discussed_amount("Seine", -1)


class TestValidation:
    """Tests for relation label validation."""

    def test_valid_graph_passes_strict(self, city_graph):
        city_graph.validate(strict_relations=True)

    def test_unknown_relation_fails_strict(self, games_graph):
        with pytest.raises(GraphError, match="competed in"):
            games_graph.validate(strict_relations=True)

    def test_unknown_relation_warns_when_lenient(self, games_graph):
        with patch("topictalk.graph.feature.logger") as mock_logger:
            games_graph.validate()
        mock_logger.warning.assert_called_once()
        assert "competed in" in mock_logger.warning.call_args[0][0]
