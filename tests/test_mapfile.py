import pytest

from fdf.mapfile import MapError, parse_map, read_map, row_length


def test_row_length_counts_values():
    assert row_length("0 0 0\n1 2 3\n") == 3


def test_row_length_empty_map():
    assert row_length("") == 0


def test_row_length_mismatch_raises():
    with pytest.raises(MapError):
        row_length("1 2 3\n1 2\n")


def test_row_length_accepts_tabs_and_trailing_space():
    assert row_length("1\t2 \n3 4\n") == 2


def test_parse_map_values():
    assert parse_map("0 0 0\n0 10 0\n") == [[0, 0, 0], [0, 10, 0]]


def test_parse_map_negative_values():
    assert parse_map("-5 3\n2 -1\n") == [[-5, 3], [2, -1]]


def test_parse_map_without_final_newline():
    assert parse_map("1 2\n3 4") == [[1, 2], [3, 4]]


def test_parse_map_shape_matches_text():
    text = "1 2 3 4\n5 6 7 8\n9 10 11 12\n"
    heights = parse_map(text)
    assert len(heights) == 3
    assert all(len(row) == 4 for row in heights)


def test_parse_map_rejects_ragged_rows():
    with pytest.raises(MapError):
        parse_map("1 2\n3\n")


def test_parse_empty_map():
    assert parse_map("") == []


def test_read_map_from_file(tmp_path):
    path = tmp_path / "map.fdf"
    path.write_text("0 1\n2 3\n")
    assert read_map(path) == [[0, 1], [2, 3]]


def test_read_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_map(tmp_path / "absent.fdf")