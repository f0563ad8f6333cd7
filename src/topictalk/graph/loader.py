"""Graph loader for YAML feature files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from topictalk.core.errors import GraphError
from topictalk.graph.feature import FeatureGraph

logger = logging.getLogger(__name__)


class GraphLoader:
    """Load and dump FeatureGraphs as YAML.

    Expected layout::

        root: Paris
        features:
          - name: Paris
            discussed: 0
            speaks: ["Paris is the capital of France."]
            neighbors:
              - {name: Louvre, relation: contain}
    """

    @staticmethod
    def load(path: Path | str, strict_relations: bool = False) -> FeatureGraph:
        """Load a feature graph from a YAML file.

        Args:
            path: Path to the graph file
            strict_relations: Reject relation labels that are not directions

        Returns:
            Validated FeatureGraph
        """
        graph_path = Path(path)
        if not graph_path.exists():
            raise FileNotFoundError(f"Graph file not found: {graph_path}")

        with open(graph_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        graph = GraphLoader.from_dict(data, strict_relations=strict_relations)
        logger.info(f"Loaded {len(graph)} features from {graph_path}")
        return graph

    @staticmethod
    def from_dict(data: dict[str, Any], strict_relations: bool = False) -> FeatureGraph:
        if not isinstance(data, dict):
            raise GraphError("Graph document must be a mapping")
        entries = data.get("features")
        if not isinstance(entries, list) or not entries:
            raise GraphError("Graph document needs a non-empty 'features' list")

        graph = FeatureGraph()
        for entry in entries:
            if not isinstance(entry, dict) or "name" not in entry:
                raise GraphError(f"Feature entry without a name: {entry!r}")
            speaks = entry.get("speaks") or []
            if isinstance(speaks, str):
                speaks = [speaks]
            name = str(entry["name"])
            try:
                discussed = int(entry.get("discussed", 0))
            except (TypeError, ValueError) as e:
                raise GraphError(f"Invalid discussed amount for '{name}'") from e
            graph.add_feature(name, speaks=[str(s) for s in speaks], discussed_amount=discussed)

        # Edges go in after every feature exists so forward references resolve
        for entry in entries:
            for neighbor in entry.get("neighbors") or []:
                if not isinstance(neighbor, dict) or "name" not in neighbor:
                    raise GraphError(f"Neighbor entry without a name under '{entry['name']}'")
                graph.add_edge(
                    str(entry["name"]),
                    str(neighbor["name"]),
                    str(neighbor.get("relation", "")),
                )

        root = data.get("root")
        if root is not None:
            graph.set_root(str(root))

        graph.validate(strict_relations=strict_relations)
        return graph

    @staticmethod
    def to_dict(graph: FeatureGraph) -> dict[str, Any]:
        features = []
        for feature in graph:
            entry: dict[str, Any] = {"name": feature.name, "discussed": feature.discussed_amount}
            if feature.speaks:
                entry["speaks"] = list(feature.speaks)
            if feature.edges:
                entry["neighbors"] = [
                    {"name": target.name, "relation": edge.relation}
                    for target, edge in graph.neighbors(feature)
                ]
            features.append(entry)
        return {"root": graph.root.name, "features": features}

    @staticmethod
    def dump(graph: FeatureGraph, path: Path | str) -> None:
        """Write ``graph`` (including discussion counts) back to YAML."""
        with open(Path(path), "w", encoding="utf-8") as f:
            yaml.safe_dump(GraphLoader.to_dict(graph), f, sort_keys=False, allow_unicode=True)
        logger.debug(f"Saved graph to {path}")
