import pytest

from sortbench.fileio import ValueKind, format_values, load_values, save_values


def _write(tmp_path, text):
    path = tmp_path / "data.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_ints(tmp_path):
    path = _write(tmp_path, "3\n5\n-2\n7\n")
    assert load_values(path, ValueKind.INT) == [5, -2, 7]


def test_load_floats(tmp_path):
    path = _write(tmp_path, "2\n1.5\n-0.25\n")
    assert load_values(path, ValueKind.DOUBLE) == [1.5, -0.25]


def test_load_ignores_lines_beyond_count(tmp_path):
    path = _write(tmp_path, "1\n4\n9\n")
    assert load_values(path, 0) == [4]


def test_int_round_trip(tmp_path):
    values = [3, -1, 2147483647, -2147483648, 0]
    path = tmp_path / "out.txt"
    save_values(path, values)
    assert load_values(path, ValueKind.INT) == values


def test_float_round_trip(tmp_path):
    values = [0.5, -2.25, 100.0]
    path = tmp_path / "out.txt"
    save_values(path, values)
    assert load_values(path, ValueKind.FLOAT) == values


def test_saved_layout(tmp_path):
    path = tmp_path / "out.txt"
    save_values(path, [0.5])
    assert path.read_text(encoding="utf-8") == "1\n0.5\n"


def test_save_empty_raises(tmp_path):
    with pytest.raises(ValueError, match="No data to save"):
        save_values(tmp_path / "out.txt", [])


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_values(tmp_path / "absent.txt", ValueKind.INT)


def test_empty_file_raises(tmp_path):
    with pytest.raises(ValueError, match="Empty file"):
        load_values(_write(tmp_path, ""), ValueKind.INT)


def test_invalid_size_raises(tmp_path):
    with pytest.raises(ValueError, match="Invalid size"):
        load_values(_write(tmp_path, "abc\n1\n"), ValueKind.INT)


@pytest.mark.parametrize("header", ["0", "-3"])
def test_non_positive_size_raises(tmp_path, header):
    with pytest.raises(ValueError, match="Size must be positive"):
        load_values(_write(tmp_path, f"{header}\n1\n"), ValueKind.INT)


def test_unexpected_end_raises(tmp_path):
    with pytest.raises(ValueError, match="Unexpected end of the file at line 2"):
        load_values(_write(tmp_path, "3\n1\n"), ValueKind.INT)


def test_invalid_data_raises(tmp_path):
    with pytest.raises(ValueError, match="Invalid data at line 3"):
        load_values(_write(tmp_path, "2\n1\nxyz\n"), ValueKind.INT)


def test_extra_data_raises(tmp_path):
    with pytest.raises(ValueError, match="Extra data at line 2"):
        load_values(_write(tmp_path, "1\n1 2\n"), ValueKind.INT)


def test_int_out_of_range_is_invalid(tmp_path):
    with pytest.raises(ValueError, match="Invalid data"):
        load_values(_write(tmp_path, "1\n2147483648\n"), ValueKind.INT)


def test_format_values():
    assert format_values([1, 2, 3]) == "{1, 2, 3}"
    assert format_values([]) == "{}"