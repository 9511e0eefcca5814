"""Graph view of expression trees, used to show nesting the flat text hides."""

from enum import Enum

import networkx as nx

from chance.expressions.expression import Expression, Leaf


class NodeKind(Enum):
    """Graph node kinds."""

    OPERAND = 0
    OPERATOR = 1


class ExpressionGraphBuilder:
    """Converts an expression tree into a networkx DiGraph.

    Operator nodes get two children: the left operand and the root of the
    right sub-expression. Edges point from parent to child.
    """

    def __init__(self) -> None:
        self.graph = nx.DiGraph()
        self.node_counter = 0

    def build(self, expr: Expression) -> nx.DiGraph:
        """
        Build a fresh graph for an expression.

        Args:
            expr: Expression tree to convert

        Returns:
            DiGraph rooted at node 0, with ``kind``, ``label`` and ``depth``
            node attributes
        """
        self.graph = nx.DiGraph()
        self.node_counter = 0
        self._add_subtree(expr, parent_id=None, depth=0)
        return self.graph

    def _add_node(self, kind: NodeKind, label: str, parent_id: int | None, depth: int) -> int:
        node_id = self.node_counter
        self.node_counter += 1
        self.graph.add_node(node_id, kind=kind.value, label=label, depth=depth)
        if parent_id is not None:
            self.graph.add_edge(parent_id, node_id)
        return node_id

    def _add_subtree(self, expr: Expression, parent_id: int | None, depth: int) -> int:
        if isinstance(expr, Leaf):
            return self._add_node(NodeKind.OPERAND, str(expr.value), parent_id, depth)

        node_id = self._add_node(NodeKind.OPERATOR, str(expr.operator), parent_id, depth)
        self._add_node(NodeKind.OPERAND, str(expr.left), node_id, depth + 1)
        self._add_subtree(expr.right, parent_id=node_id, depth=depth + 1)
        return node_id


def to_text_tree(expr: Expression) -> str:
    """Render the nested structure of an expression as an indented text tree."""
    graph = ExpressionGraphBuilder().build(expr)
    lines: list[str] = []
    nx.write_network_text(graph, path=lines.append, with_labels=True, sources=[0], end="")
    return "\n".join(lines)
