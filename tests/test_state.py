import pytest

from shopmap.config import DEFAULT_SHELF_COLOR, GRID_SIZE
from shopmap.model.errors import (
    BlankItemError,
    FormatError,
    IndexOutOfRange,
    InvalidStateTransition,
)
from shopmap.model.shelf import Shelf
from shopmap.model.state import ShopMapState, empty_slots


def test_new_state_is_empty(state):
    slots = state.observe()
    assert len(slots) == GRID_SIZE
    assert all(slot is None for slot in slots)
    assert state.occupied_count() == 0


@pytest.mark.parametrize("index", [0, 5, 31, GRID_SIZE - 1])
def test_occupy_slot_creates_default_shelf(state, index):
    before = state.observe()

    shelf = state.occupy_slot(index)

    after = state.observe()
    assert after[index] == shelf
    assert shelf.index == index
    assert shelf.name == f"Shelf {index + 1}"
    assert shelf.color == DEFAULT_SHELF_COLOR
    assert shelf.items == ()
    for position in range(GRID_SIZE):
        if position != index:
            assert after[position] == before[position]


def test_occupy_every_slot(state):
    for index in range(GRID_SIZE):
        state.occupy_slot(index)

    assert state.occupied_count() == GRID_SIZE
    assert [shelf.index for shelf in state.observe()] == list(range(GRID_SIZE))


def test_occupy_occupied_slot_is_rejected(state, recorded):
    first = state.occupy_slot(3)
    state.add_item(3, "Tea")
    recorded.clear()

    with pytest.raises(InvalidStateTransition):
        state.occupy_slot(3)

    assert state.shelf_at(3) == first.with_item("Tea")
    assert recorded == []


@pytest.mark.parametrize("index", [-1, GRID_SIZE, 100, "3", 2.0, True])
def test_out_of_range_index_is_rejected(state, index):
    with pytest.raises(IndexOutOfRange):
        state.occupy_slot(index)
    with pytest.raises(IndexOutOfRange):
        state.add_item(index, "Milk")
    with pytest.raises(IndexOutOfRange):
        state.shelf_at(index)


def test_add_item_appends(state):
    state.occupy_slot(7)
    state.add_item(7, "Milk")
    previous = state.shelf_at(7).items

    updated = state.add_item(7, "Bread")

    assert updated.items == previous + ("Bread",)
    assert len(updated.items) == len(previous) + 1
    assert updated.index == 7
    assert updated.name == "Shelf 8"
    assert updated.color == DEFAULT_SHELF_COLOR


def test_add_item_keeps_text_verbatim(state):
    state.occupy_slot(0)
    state.add_item(0, "  Rohlík ")
    assert state.shelf_at(0).items == ("  Rohlík ",)


def test_add_item_to_empty_slot_is_rejected(state, recorded):
    with pytest.raises(InvalidStateTransition):
        state.add_item(4, "Milk")
    assert state.observe() == empty_slots()
    assert recorded == []


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_blank_item_is_rejected(state, text):
    state.occupy_slot(2)
    with pytest.raises(BlankItemError):
        state.add_item(2, text)
    assert state.shelf_at(2).items == ()


def test_observe_is_stable_between_mutations(state):
    state.occupy_slot(1)
    assert state.observe() == state.observe()


def test_snapshot_not_affected_by_later_mutations(state):
    state.occupy_slot(10)
    snapshot = state.observe()

    state.add_item(10, "Eggs")
    state.occupy_slot(11)

    assert snapshot[10].items == ()
    assert snapshot[11] is None
    assert isinstance(snapshot, tuple)


def test_mutations_emit_new_snapshot(state, recorded):
    state.occupy_slot(0)
    state.add_item(0, "Salt")

    assert len(recorded) == 2
    assert recorded[0][0].items == ()
    assert recorded[1][0].items == ("Salt",)
    assert recorded[-1] == state.observe()


def test_replace_all(state, recorded):
    state.occupy_slot(0)
    new_slots = list(empty_slots())
    new_slots[9] = Shelf(index=9, name="Drinks", color=0xFF112233, items=("Water",))

    state.replace_all(new_slots)

    assert state.observe() == tuple(new_slots)
    assert recorded[-1] == tuple(new_slots)


def test_replace_all_accepts_mismatched_index(state):
    new_slots = list(empty_slots())
    new_slots[0] = Shelf(index=42, name="Moved", color=0xFF000000, items=())

    state.replace_all(new_slots)

    assert state.shelf_at(0).index == 42


@pytest.mark.parametrize("length", [0, GRID_SIZE - 1, GRID_SIZE + 1])
def test_replace_all_wrong_length_leaves_state(state, recorded, length):
    state.occupy_slot(5)
    before = state.observe()
    recorded.clear()

    with pytest.raises(FormatError):
        state.replace_all([None] * length)

    assert state.observe() == before
    assert recorded == []


def test_replace_all_rejects_foreign_objects(state):
    bad = list(empty_slots())
    bad[3] = {"index": 3}
    with pytest.raises(FormatError):
        state.replace_all(bad)
    assert state.observe() == empty_slots()


def test_reset(state, recorded):
    state.occupy_slot(0)
    state.occupy_slot(59)

    state.reset()

    assert state.observe() == empty_slots()
    assert recorded[-1] == empty_slots()


def test_state_can_start_from_slots():
    slots = list(empty_slots())
    slots[1] = Shelf.create(1)
    state = ShopMapState(slots)
    assert state.shelf_at(1).name == "Shelf 2"


def test_states_are_independent():
    first = ShopMapState()
    second = ShopMapState()
    first.occupy_slot(0)
    assert second.shelf_at(0) is None


def test_replace_all_detaches_caller_item_list(state):
    items = ["Milk"]
    new_slots = list(empty_slots())
    new_slots[4] = Shelf(index=4, name="Dairy", color=0xFFFFFFFF, items=items)

    state.replace_all(new_slots)
    snapshot = state.observe()
    items.append("Cheese")

    assert state.observe() == snapshot
    assert snapshot[4].items == ("Milk",)
