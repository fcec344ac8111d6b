"""Grid Chase: a terminal monster-and-target chase game.

The player steers a monster across a small fixed grid by typing a path of
``w``/``a``/``s``/``d`` keys. Landing on the target scores a point and the
target respawns on a random empty cell; ending a path anywhere else leaves a
footprint and ends the game.

The engine follows an immutable reducer style: every turn transition takes a
frozen :class:`grid_chase.state.State` and returns a new one. The stateful
:class:`grid_chase.engine.GameEngine` wires those reducers to a display
surface and an input source.
"""
