"""Basic tests for the toruslife package."""

import toruslife
from toruslife import Cell, Grid, GameOfLife, PatternLibrary


def test_version():
    assert toruslife.__version__ == "0.1.0"


def test_grid_creation():
    """Test basic grid creation and cell operations."""
    grid = Grid(10, 10, 3, 7)
    assert grid.width == 10
    assert grid.height == 10
    assert grid.get_cell(0, 0) is Cell.ALIVE
    assert grid.get_cell(0, 1) is Cell.DEAD

    grid.toggle_cell(0, 1)
    assert grid.get_cell(0, 1) is Cell.ALIVE


def test_game_creation():
    """Test basic game creation."""
    grid = Grid(5, 5, 1, 1)
    grid.reset()
    game = GameOfLife(grid)
    assert game.population == 0

    grid.set_cells([(2, 2)])
    assert game.population == 1


def test_pattern_library():
    """Test pattern library has some patterns."""
    library = PatternLibrary()
    patterns = library.list_patterns()
    assert len(patterns) > 0
    assert "Glider" in patterns


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    grid = Grid(5, 5, 1, 1)
    game = GameOfLife(grid)
    PatternLibrary().get_pattern("Blinker").apply_to_grid(grid, 1, 1)
    game.clear_cycle_detection()

    assert game.population == 3
    assert grid.get_cell(2, 1) is Cell.ALIVE
    assert grid.get_cell(2, 2) is Cell.ALIVE
    assert grid.get_cell(2, 3) is Cell.ALIVE

    game.step()
    assert game.population == 3
    assert grid.get_cell(1, 2) is Cell.ALIVE
    assert grid.get_cell(2, 2) is Cell.ALIVE
    assert grid.get_cell(3, 2) is Cell.ALIVE

    game.step()
    assert game.population == 3
    assert grid.get_cell(2, 1) is Cell.ALIVE
    assert grid.get_cell(2, 2) is Cell.ALIVE
    assert grid.get_cell(2, 3) is Cell.ALIVE
    assert game.cycle_length == 2
