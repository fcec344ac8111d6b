"""Turn resolution systems.

Each system is a pure ``State -> State`` function handling one concern of
turn resolution (capture bookkeeping, target respawn, game over). They are
composed in :func:`grid_chase.step.resolve_turn`.
"""
