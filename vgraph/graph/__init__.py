from .adjacency_graph import AdjacencyGraph
from .graph_transformer import FilterEdgesGraph, LimitEdgesGraph
from .virtual_graph import VGraph
