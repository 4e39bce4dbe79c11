"""
Minesweeper.

Board model, game controller and text front end for a single-player
Minesweeper game.
"""
__version__ = "0.1.0"
