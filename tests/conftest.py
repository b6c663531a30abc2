import pytest


@pytest.fixture
def binary_ppm(tmp_path):
    path = tmp_path / "input.ppm"
    path.write_bytes(b"P6\n# sample\n4 4\n255\n" + bytes([100, 150, 200]) * 16)
    return path


@pytest.fixture
def ascii_ppm(tmp_path):
    path = tmp_path / "input_ascii.ppm"
    rows = ["0 0 0 2 2 2 9 9 9", "4 4 4 6 6 6 9 9 9", "9 9 9 9 9 9 9 9 9"]
    path.write_text("P3\n3 3\n15\n" + "\n".join(rows) + "\n")
    return path
