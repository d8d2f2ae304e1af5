from .astar_search import AStar, a_star_search
from .back_track import back_track
from .bfs_search import BFS, breadth_first_search
from .search_strategy import SearchStrategy
