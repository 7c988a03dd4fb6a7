"""
SpotCoach: Postflop Decision Aid

Solves a heads-up BTN vs BB flop with an external console solver, then
reads the solved tree to show what the hero should do on the flop, turn
and river, alongside a quick strength read of the hero's hand.
"""

__version__ = "0.1.0"
