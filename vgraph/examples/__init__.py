from .ring_puzzle import RingPuzzle, RingState, solve_ring_puzzle
