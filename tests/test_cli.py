import pytest

from snakeboard.cli import main, run
from snakeboard.state import create_default_state, load_board


@pytest.fixture
def default_board(tmp_path):
    path = tmp_path / "in.snk"
    create_default_state().save(str(path))
    return path


def test_run_moves_snake_one_step(default_board, tmp_path):
    out = tmp_path / "out.snk"
    state = run(str(default_board), str(out))
    assert state.rows[2] == "#  d>D   *         #"
    assert out.read_text(encoding="latin-1") == state.render()


def test_run_snake_record_after_step(default_board, tmp_path):
    state = run(str(default_board), str(tmp_path / "out.snk"))
    snake = state.snakes[0]
    assert (snake.tail_row, snake.tail_col) == (2, 3)
    assert (snake.head_row, snake.head_col) == (2, 5)
    assert snake.live


def test_run_eating_food_grows_and_places_new_food(tmp_path):
    board = create_default_state()
    board.set(2, 5, "*")
    path = tmp_path / "in.snk"
    board.save(str(path))
    state = run(str(path), str(tmp_path / "out.snk"))
    assert state.rows[2].startswith("# d>>D")
    assert sum(line.count("*") for line in state.rows) == 2
    assert (state.snakes[0].tail_row, state.snakes[0].tail_col) == (2, 2)


def test_run_is_deterministic(tmp_path):
    board = create_default_state()
    board.set(2, 5, "*")
    path = tmp_path / "in.snk"
    board.save(str(path))
    first = run(str(path), str(tmp_path / "a.snk"))
    second = run(str(path), str(tmp_path / "b.snk"))
    assert first == second


def test_run_without_output_prints(default_board, capsys):
    state = run(str(default_board), None)
    assert capsys.readouterr().out == state.render()


def test_main_writes_output_file(default_board, tmp_path):
    out = tmp_path / "out.snk"
    assert main(["-i", str(default_board), "-o", str(out)]) == 0
    assert load_board(str(out)).rows[2] == "#  d>D   *         #"


def test_main_prints_without_output(default_board, capsys):
    assert main(["-i", str(default_board)]) == 0
    assert "#  d>D   *         #\n" in capsys.readouterr().out


def test_main_without_input_fails():
    assert main([]) == -1


def test_main_nonexistent_input_fails(tmp_path):
    assert main(["-i", str(tmp_path / "missing.snk")]) == -1


@pytest.mark.parametrize("argv", [["-x"], ["-i"], ["-i", "a", "-o"], ["extra"]])
def test_main_bad_arguments(argv, capsys):
    assert main(argv) == 1
    assert "Usage:" in capsys.readouterr().err