"""Tests for the workflow state reducer."""

import pytest

from conftest import DELHI, MUMBAI
from navmap.workflow.state import (
    EditName,
    Phase,
    SelectTileStyle,
    SetCoords,
    SetLocation,
    Swap,
    TileStyle,
    WorkflowState,
    reduce,
)


def both_resolved() -> WorkflowState:
    state = WorkflowState()
    state = reduce(state, SetLocation(endpoint="start", name="Delhi", coords=DELHI))
    return reduce(state, SetLocation(endpoint="end", name="Mumbai", coords=MUMBAI))


def test_initial_state_is_empty():
    state = WorkflowState()
    assert state.phase == Phase.EMPTY
    assert state.tile_style == TileStyle.NORMAL


def test_editing_name_does_not_change_resolution():
    state = reduce(WorkflowState(), SetCoords(endpoint="start", coords=DELHI))
    edited = reduce(state, EditName(endpoint="start", name="Somewhere else"))

    assert edited.phase == Phase.START_ONLY
    assert edited.start.coords == DELHI
    assert edited.start.name == "Somewhere else"


@pytest.mark.parametrize(
    "actions,phase",
    [
        ([], Phase.EMPTY),
        ([SetCoords(endpoint="start", coords=DELHI)], Phase.START_ONLY),
        ([SetCoords(endpoint="end", coords=MUMBAI)], Phase.END_ONLY),
        (
            [SetCoords(endpoint="start", coords=DELHI), SetCoords(endpoint="end", coords=MUMBAI)],
            Phase.BOTH_RESOLVED,
        ),
    ],
)
def test_phase_follows_resolved_endpoints(actions, phase):
    state = WorkflowState()
    for action in actions:
        state = reduce(state, action)
    assert state.phase == phase


def test_reduce_never_mutates_previous_state():
    before = WorkflowState()
    after = reduce(before, EditName(endpoint="end", name="Mumbai"))

    assert before.end.name == ""
    assert after.end.name == "Mumbai"
    assert after is not before


def test_swap_exchanges_name_and_coords():
    swapped = reduce(both_resolved(), Swap())

    assert swapped.phase == Phase.BOTH_RESOLVED
    assert (swapped.start.name, swapped.start.coords) == ("Mumbai", MUMBAI)
    assert (swapped.end.name, swapped.end.coords) == ("Delhi", DELHI)


def test_swap_preserves_partial_resolution():
    state = reduce(WorkflowState(), SetLocation(endpoint="start", name="Delhi", coords=DELHI))
    state = reduce(state, EditName(endpoint="end", name="Mumbai"))

    swapped = reduce(state, Swap())

    assert swapped.phase == Phase.END_ONLY
    assert swapped.start.name == "Mumbai"
    assert swapped.start.coords is None


@pytest.mark.parametrize(
    "state",
    [
        WorkflowState(),
        both_resolved(),
        reduce(WorkflowState(), SetCoords(endpoint="end", coords=MUMBAI)),
    ],
)
def test_swap_twice_is_identity(state):
    assert reduce(reduce(state, Swap()), Swap()) == state


def test_tile_style_is_independent_of_locations():
    state = both_resolved()
    styled = reduce(state, SelectTileStyle(style=TileStyle.SATELLITE))

    assert styled.tile_style == TileStyle.SATELLITE
    assert styled.start == state.start
    assert styled.end == state.end
