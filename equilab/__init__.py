"""
Equilab: Monte Carlo Hold'em Equity Engine

Card notation parsing, a fast 5-7 card hand evaluator and a seeded
Monte Carlo simulator that estimates a hand's share of the pot against
one or more opponents on a partial or complete board.
"""

__version__ = "0.1.0"
