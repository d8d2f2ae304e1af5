from vgraph.graph.adjacency_graph import AdjacencyGraph
from vgraph.graph.graph_transformer import FilterEdgesGraph, LimitEdgesGraph
from vgraph.graph.virtual_graph import VGraph
from vgraph.path_length import InvalidPathError, path_length
from vgraph.search.astar_search import AStar, a_star_search
from vgraph.search.back_track import back_track
from vgraph.search.bfs_search import BFS, breadth_first_search
from vgraph.search.search_strategy import SearchStrategy

from . import examples, search
