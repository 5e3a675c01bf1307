"""
TicTacToe
=========
A command line TicTacToe game for two players, or against a
computer opponent that plays perfectly (minimax).

Cross plays first. Moves are typed as two digits: column, then row.
"""

__version__ = "1.0.0"
