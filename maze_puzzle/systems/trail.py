"""Trail classification system.

Updates the live route and ``State.backtracked`` for a step onto ``target``:

* ``target`` already on the trail: the live route looped back. Everything
    visited since the last time at ``target`` is popped off the route and
    marked backtracked. ``target`` itself stays.
* otherwise ``target`` is pushed onto the route, and un-marked as
    backtracked if it had been abandoned earlier.

``start`` is the first trail element and is never trimmed, so the trail can
never become empty. Each cell is pushed and popped at most once per visit,
so a whole walk costs time linear in its number of moves.
"""

from dataclasses import replace

from maze_puzzle.components import Position
from maze_puzzle.state import State
from maze_puzzle.utils.trail import last_index_of


def trail_system(state: State, target: Position) -> State:
    """Classify ``target`` and return the state with updated trail sets."""
    index = last_index_of(state, target)
    if index is not None:
        route = state.route
        trail_index = state.trail_index.evolver()
        backtracked = state.backtracked.evolver()
        while route.first != target:
            trail_index.remove(route.first)
            backtracked.add(route.first)
            route = route.rest
        return replace(
            state,
            route=route,
            trail_index=trail_index.persistent(),
            backtracked=backtracked.persistent(),
        )
    return replace(
        state,
        route=state.route.cons(target),
        trail_index=state.trail_index.set(target, state.trail_length),
        backtracked=state.backtracked.discard(target),
    )
