"""Rendering subpackage.

Turns immutable ``State`` snapshots into something a player can look at:

* :mod:`grid_chase.renderer.text` maps cells to glyph rows and builds the
    score line. Pure functions, no I/O.
* :mod:`grid_chase.renderer.console` draws those rows on a terminal using
    ``rich`` and reads the player's path.
* :mod:`grid_chase.renderer.texture` composes a Pillow image of the board
    for graphical front ends and the Gymnasium wrapper.
"""
