"""
Fragment dependency graph using NetworkX.

Nodes are fragment names; an edge A -> B means "B spreads A", so A must be
declared before B. The graph answers three questions for the emitters:

- in which order fragment constants are declared (dependencies first),
- which fragments a definition spreads directly (the `${...}` interpolations
  of a tagged template),
- which fragments a definition needs transitively (the extra definitions of a
  serialized DocumentNode).

Ties in the ordering keep the order in which fragments were collected.
"""

from typing import Dict, Iterable, List

import networkx as nx
from graphql import FragmentDefinitionNode, Visitor, visit

from vue_apollo_codegen.errors import FragmentCycleError


class _SpreadCollector(Visitor):
    """Collect fragment spread names in first-use order."""

    def __init__(self):
        super().__init__()
        self.names: List[str] = []

    def enter_fragment_spread(self, node, *_args):
        name = node.name.value
        if name not in self.names:
            self.names.append(name)


def fragment_spreads(node) -> List[str]:
    """Names of the fragments spread directly inside `node`, each listed once."""
    collector = _SpreadCollector()
    visit(node, collector)
    return collector.names


class FragmentGraph:
    """Dependency graph over the fragments collected from all documents."""

    def __init__(self, fragments: Iterable[FragmentDefinitionNode]):
        self.graph = nx.DiGraph()
        self._index: Dict[str, int] = {}
        self._build_graph(list(fragments))

    def _build_graph(self, fragments):
        for position, fragment in enumerate(fragments):
            name = fragment.name.value
            self._index[name] = position
            self.graph.add_node(name, node=fragment, spreads=fragment_spreads(fragment))

        for name in list(self.graph.nodes):
            for dependency in self.graph.nodes[name]["spreads"]:
                # Spreads of fragments defined outside the document set stay unresolved
                if dependency in self.graph:
                    self.graph.add_edge(dependency, name)

    def node(self, name: str) -> FragmentDefinitionNode:
        return self.graph.nodes[name]["node"]

    def spreads(self, name: str) -> List[str]:
        return list(self.graph.nodes[name]["spreads"])

    def ordered(self) -> List[FragmentDefinitionNode]:
        """All fragments, every fragment after the fragments it spreads."""
        return [self.node(name) for name in self._sorted(self.graph)]

    def dependencies(self, names: Iterable[str]) -> List[FragmentDefinitionNode]:
        """
        Fragments reachable from `names` (the named fragments included),
        dependencies first. Unknown names are skipped.
        """
        wanted = set()
        for name in names:
            if name not in self.graph:
                continue
            wanted.add(name)
            wanted |= nx.ancestors(self.graph, name)
        return [self.node(name) for name in self._sorted(self.graph.subgraph(wanted))]

    def _sorted(self, graph) -> List[str]:
        try:
            return list(
                nx.lexicographical_topological_sort(graph, key=lambda name: self._index[name])
            )
        except nx.NetworkXUnfeasible:
            cycle = [edge[0] for edge in nx.find_cycle(graph)]
            raise FragmentCycleError(cycle) from None
