"""
Classroom graph builder.

Turns a roster and its survey responses into a vertex set and a directed,
typed, weighted edge list. Degree counters are accumulated in a private
id -> metrics mapping and only then materialized as immutable GraphNode
objects, so no node object is ever shared while it is still changing.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import networkx as nx

from ..config import RiskConfig
from ..models import EdgeType, GraphEdge, GraphNode, Student, SurveyResponse

logger = logging.getLogger(__name__)


@dataclass
class NodeMetrics:
    """Mutable degree counters for one student during a build."""

    in_degree: int = 0
    out_degree: int = 0
    conflict_score: int = 0


class GraphBuilder:
    """Builds the classroom sociogram from survey responses"""

    def __init__(self, config: RiskConfig | None = None):
        self.config = config or RiskConfig()

    def build(
        self, roster: Sequence[Student], responses: Sequence[SurveyResponse]
    ) -> tuple[list[GraphNode], list[GraphEdge]]:
        """Build nodes and edges for one classroom.

        Args:
            roster: Students in the classroom, ids unique
            responses: Survey responses; every response is processed, including
                repeated responses from the same student

        Returns:
            Nodes in roster order with risk_score still 0, and the edge list
            in response order
        """
        metrics: dict[str, NodeMetrics] = {student.id: NodeMetrics() for student in roster}
        edges: list[GraphEdge] = []
        skipped_responses = 0
        dropped_refs = 0

        for response in responses:
            owner_id = response.student_id
            owner = metrics.get(owner_id)
            if owner is None:
                logger.debug(f"Skipping response from {owner_id}: not on the roster")
                skipped_responses += 1
                continue

            # Positive edges (affinity)
            for target_id in response.preferred_peers:
                target = self._resolve(metrics, owner_id, target_id)
                if target is None:
                    dropped_refs += 1
                    continue
                edges.append(
                    GraphEdge(
                        source=owner_id,
                        target=target_id,
                        type=EdgeType.POSITIVE,
                        weight=self.config.positive_edge_weight,
                    )
                )
                target.in_degree += 1
                owner.out_degree += 1

            # Negative edges (tension). The sender's counters never change.
            for target_id in response.uncomfortable_peers:
                target = self._resolve(metrics, owner_id, target_id)
                if target is None:
                    dropped_refs += 1
                    continue
                edges.append(
                    GraphEdge(
                        source=owner_id,
                        target=target_id,
                        type=EdgeType.NEGATIVE,
                        weight=self.config.negative_edge_weight,
                    )
                )
                target.conflict_score += 1

        if skipped_responses or dropped_refs:
            logger.debug(
                f"Ignored {skipped_responses} responses from unknown students "
                f"and {dropped_refs} unresolvable peer references"
            )

        nodes = [
            GraphNode(
                id=student.id,
                name=student.name,
                grade=student.grade,
                avatar=student.avatar,
                in_degree=metrics[student.id].in_degree,
                out_degree=metrics[student.id].out_degree,
                conflict_score=metrics[student.id].conflict_score,
            )
            for student in roster
        ]

        logger.debug(f"Graph built with {len(nodes)} nodes and {len(edges)} edges")
        return nodes, edges

    def _resolve(self, metrics: dict[str, NodeMetrics], owner_id: str, target_id: str) -> NodeMetrics | None:
        """Return the target's counters, or None for self and unknown ids."""
        if target_id == owner_id:
            logger.debug(f"Dropping self-reference from {owner_id}")
            return None
        target = metrics.get(target_id)
        if target is None:
            logger.debug(f"Dropping reference from {owner_id} to unknown student {target_id}")
        return target


def to_networkx(nodes: Sequence[GraphNode], edges: Sequence[GraphEdge]) -> nx.MultiDiGraph:
    """Export the sociogram as a NetworkX multigraph.

    Node attributes are copies of the node fields and repeated edges between
    the same ordered pair are kept as parallel edges.
    """
    graph = nx.MultiDiGraph()
    graph.add_nodes_from((node.id, node.model_dump(exclude={"id"})) for node in nodes)
    graph.add_edges_from(
        (edge.source, edge.target, {"type": edge.type.value, "weight": edge.weight}) for edge in edges
    )
    return graph
