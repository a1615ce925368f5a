"""Tests for grid_parser module."""

import pytest

from grid_parser import parse_digit_grid, parse_grid, solid_grid, to_digit_grid
from grid_types import EmptyInputError, Grid, InputError


class TestSolidGrid:
    """Tests for solid grid construction."""

    def test_every_cell_has_initial_value(self) -> None:
        """A 3x2 solid grid maps indices 0..5 to the fill value."""
        grid = solid_grid(3, 2, ".")

        assert grid.width == 3
        assert grid.height == 2
        assert grid.infinite is False
        assert grid.last_cell == 5
        assert grid.max_dimension == 3
        assert dict(grid.cells) == {i: "." for i in range(6)}

    def test_default_value_is_none(self) -> None:
        """Without a fill value, cells are present but None."""
        grid = solid_grid(2, 2)

        assert 3 in grid
        assert grid.get(3) is None
        assert 4 not in grid

    @pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 2)])
    def test_error_non_positive_size(self, width: int, height: int) -> None:
        """Error when a dimension is not positive."""
        with pytest.raises(InputError, match="Invalid solid grid size"):
            solid_grid(width, height, 0)


class TestParseGrid:
    """Tests for the text grid parser."""

    def test_simple_grid(self) -> None:
        """Parse a simple 2x2 grid."""
        grid = parse_grid("ab\ncd\n")

        assert grid.width == 2
        assert grid.height == 2
        assert grid.infinite is False
        assert dict(grid.cells) == {0: "a", 1: "b", 2: "c", 3: "d"}

    def test_non_square_grid(self) -> None:
        """Width comes from the line length, height from the line count."""
        grid = parse_grid("abc\ndef")

        assert grid.width == 3
        assert grid.height == 2
        assert grid.max_dimension == 3
        assert grid.last_cell == 5
        assert grid.get(4) == "e"

    def test_blank_lines_ignored(self) -> None:
        """Leading, trailing and interior blank lines are dropped."""
        grid = parse_grid("\nab\n\ncd\n\n")

        assert grid.height == 2
        assert grid.get(2) == "c"

    def test_declared_width_equal_to_line_width(self) -> None:
        """Declaring the natural width changes nothing."""
        assert parse_grid("ab\ncd", width=2) == parse_grid("ab\ncd")

    def test_infinite_grid_layout(self) -> None:
        """A wider declared width spreads rows out and leaves padding unmapped."""
        grid = parse_grid("ab\ncd", width=5)

        assert grid.width == 5
        assert grid.height == 2
        assert grid.infinite is True
        assert grid.last_cell == 9
        assert dict(grid.cells) == {0: "a", 1: "b", 5: "c", 6: "d"}
        assert 2 not in grid
        assert grid.get(2) is None

    def test_grid_is_read_only(self) -> None:
        """Cells cannot be changed in place."""
        grid = parse_grid("ab")

        with pytest.raises(TypeError):
            grid.cells[0] = "z"  # type: ignore[index]

    def test_source_mapping_is_copied(self) -> None:
        """Mutating the dict a Grid was built from does not leak in."""
        cells = {0: "a"}
        grid = Grid(cells, 1, 1)
        cells[0] = "z"

        assert grid.get(0) == "a"

    @pytest.mark.parametrize("text", ["", "\n", "\n\n\n"])
    def test_error_empty_input(self, text: str) -> None:
        """Error when there are no non-empty lines."""
        with pytest.raises(EmptyInputError):
            parse_grid(text)

    def test_empty_input_is_an_input_error(self) -> None:
        """EmptyInputError can be caught as InputError."""
        with pytest.raises(InputError):
            parse_grid("")

    def test_error_ragged_rows(self) -> None:
        """Error when rows have different lengths."""
        with pytest.raises(InputError, match="Inconsistent row lengths") as exc_info:
            parse_grid("abc\nde\nfgh")

        assert "Row 1: 2 columns" in str(exc_info.value)

    def test_error_declared_width_too_narrow(self) -> None:
        """Error when the declared width would overlap rows."""
        with pytest.raises(InputError, match="narrower"):
            parse_grid("abc\ndef", width=2)


class TestDigitGrid:
    """Tests for digit coercion."""

    def test_digit_grid(self) -> None:
        """'12\\n34\\n' becomes a 2x2 grid of ints."""
        grid = parse_digit_grid("12\n34\n")

        assert dict(grid.cells) == {0: 1, 1: 2, 2: 3, 3: 4}
        assert grid.width == 2
        assert grid.height == 2

    def test_coercion_is_idempotent(self) -> None:
        """Applying the coercion twice gives the same grid."""
        once = parse_digit_grid("90\n07")
        twice = to_digit_grid(once)

        assert twice == once
        assert dict(twice.cells) == {0: 9, 1: 0, 2: 0, 3: 7}

    def test_mixed_ints_and_digits(self) -> None:
        """Cells that are already ints are left alone."""
        grid = to_digit_grid(Grid({0: 5, 1: "6"}, 2, 1))

        assert dict(grid.cells) == {0: 5, 1: 6}

    def test_keeps_infinite_layout(self) -> None:
        """Coercion keeps width and the infinite flag."""
        grid = to_digit_grid(parse_grid("12\n34", width=4))

        assert grid.infinite is True
        assert dict(grid.cells) == {0: 1, 1: 2, 4: 3, 5: 4}

    def test_error_non_digit(self) -> None:
        """Error names the offending cell."""
        with pytest.raises(InputError, match="Invalid digit cell") as exc_info:
            parse_digit_grid("12\n3x")

        assert "Index: 3 (x=1, y=1)" in str(exc_info.value)

    def test_error_none_value(self) -> None:
        """A None cell cannot be coerced."""
        with pytest.raises(InputError):
            to_digit_grid(solid_grid(1, 1))
