from tilesearch.engine.gameplay.game import GamePlay, apply_move
from tilesearch.engine.gameplay.successors import neighbors, successor_tiles

__all__ = ["GamePlay", "apply_move", "neighbors", "successor_tiles"]
