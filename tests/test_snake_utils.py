import pytest

from snakeboard.snake_utils import (
    Lfsr,
    corner_food,
    deterministic_food,
    random_turn,
    redirect_snake,
)
from snakeboard.state import GameState, Snake, create_default_state


# Lfsr


def test_lfsr_first_value_from_seed_one():
    assert Lfsr(1).next_value() == 0x80000057


def test_lfsr_zero_seed_behaves_like_one():
    assert Lfsr(0).next_value() == Lfsr(1).next_value()


def test_lfsr_even_state_shifts_right():
    seed = 10
    assert Lfsr(seed).next_value() == seed >> 1


def test_lfsr_is_deterministic():
    first, second = Lfsr(7), Lfsr(7)
    assert [first.next_value() for _ in range(50)] == [second.next_value() for _ in range(50)]


def test_lfsr_stays_in_32_bits_and_nonzero():
    rng = Lfsr(12345)
    values = [rng.next_value() for _ in range(1000)]
    assert all(0 < value < 2**32 for value in values)


# Food


def test_deterministic_food_places_food_on_empty_cell():
    state = create_default_state()
    before = state.rows
    row, col = deterministic_food(state, Lfsr(1))
    assert before[row][col] == " "
    assert state.get(row, col) == "*"
    assert "".join(state.rows).count(" ") == "".join(before).count(" ") - 1


def test_deterministic_food_is_repeatable():
    first, second = create_default_state(), create_default_state()
    assert deterministic_food(first, Lfsr(5)) == deterministic_food(second, Lfsr(5))
    assert first == second


def test_deterministic_food_finds_only_free_cell():
    state = GameState(["###", "# #", "###"])
    assert deterministic_food(state, Lfsr(3)) == (1, 1)
    assert state.rows == ["###", "#*#", "###"]


def test_deterministic_food_default_generator():
    state = create_default_state()
    row, col = deterministic_food(state)
    assert state.get(row, col) == "*"


def test_deterministic_food_full_board_raises():
    state = GameState(["###", "###"])
    with pytest.raises(ValueError):
        deterministic_food(state, Lfsr(1))


def test_food_used_by_update_when_eating():
    state = create_default_state()
    state.set(2, 5, "*")
    state.update(lambda s: deterministic_food(s, Lfsr(1)))
    assert state.get(2, 5) == "D"
    assert "".join(state.rows).count("*") == 2


def test_corner_food():
    state = create_default_state()
    assert corner_food(state) == (1, 1)
    assert state.get(1, 1) == "*"


# Steering


def test_redirect_snake_sets_head():
    state = create_default_state()
    redirect_snake(state, "w")
    assert state.get(2, 4) == "W"


@pytest.mark.parametrize("key,head", [("a", "A"), ("s", "S"), ("d", "D")])
def test_redirect_snake_other_keys(key, head):
    state = create_default_state()
    redirect_snake(state, key)
    assert state.get(2, 4) == head


def test_redirect_snake_ignores_unknown_key():
    state = create_default_state()
    redirect_snake(state, "q")
    assert state == create_default_state()


def test_redirect_snake_ignores_dead_snake():
    state = create_default_state()
    state.snakes[0].live = False
    redirect_snake(state, "w")
    assert state.get(2, 4) == "D"


def test_redirect_snake_without_snakes():
    state = GameState(["###", "# #", "###"])
    redirect_snake(state, "w")
    assert state.rows == ["###", "# #", "###"]


# Random turns


def test_random_turn_odd_value_turns_back():
    state = create_default_state()
    random_turn(state, 0, Lfsr(1))
    assert state.get(2, 4) == "^"


def test_random_turn_even_value_turns_forward():
    state = create_default_state()
    random_turn(state, 0, Lfsr(4))
    assert state.get(2, 4) == "v"


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 99])
def test_random_turn_is_a_quarter_turn(seed):
    state = GameState(["#####", "# d>#", "#####"], [Snake(1, 2, 1, 3)])
    random_turn(state, 0, Lfsr(seed))
    assert state.get(1, 3) in {"v", "^"}


def test_random_turn_only_touches_head():
    state = create_default_state()
    before = state.rows
    random_turn(state, 0, Lfsr(8))
    after = state.rows
    changed = [
        (row, col)
        for row, (old, new) in enumerate(zip(before, after))
        for col, (a, b) in enumerate(zip(old, new))
        if a != b
    ]
    assert changed == [(2, 4)]