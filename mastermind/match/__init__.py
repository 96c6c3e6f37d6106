from .board import Board
from .players import Player, HumanPlayer, AIPlayer
from .game import Game

__all__ = ["Board", "Player", "HumanPlayer", "AIPlayer", "Game"]
