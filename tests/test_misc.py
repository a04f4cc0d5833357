import os

import pytest

from terrainview.misc import (
    create_path,
    mkdir_p,
    normalize_periodic,
    sized_unit_text,
    sized_unit_value,
)


@pytest.mark.parametrize("value", [-725.0, -1.0, 0.0, 10.0, 359.9, 360.0, 1000.0])
def test_normalize_periodic_in_range(value):
    r = normalize_periodic(0.0, 360.0, value)
    assert 0.0 <= r < 360.0
    assert (r - value) % 360.0 == pytest.approx(0.0, abs=1e-9) or (
        (value - r) % 360.0 == pytest.approx(0.0, abs=1e-9)
    )


def test_normalize_periodic_wraps():
    assert normalize_periodic(0.0, 360.0, 370.0) == pytest.approx(10.0)
    assert normalize_periodic(-180.0, 180.0, 190.0) == pytest.approx(-170.0)


def test_normalize_periodic_max_maps_to_min():
    assert normalize_periodic(-180.0, 180.0, 180.0) == -180.0


def test_normalize_periodic_empty_range_returns_min():
    assert normalize_periodic(5.0, 5.0, 42.0) == 5.0


@pytest.mark.parametrize(
    "amount,text",
    [(0, "Bytes"), (1023, "Bytes"), (1024, "KB"), (1024**2, "MB"), (1024**3, "GB"), (5 * 1024**3, "GB")],
)
def test_sized_unit_text(amount, text):
    assert sized_unit_text(amount) == text


@pytest.mark.parametrize("factor", [1, 2, 7])
def test_sized_unit_value(factor):
    assert sized_unit_value(factor * 1024) == factor
    assert sized_unit_value(factor * 1024**2) == factor
    assert sized_unit_value(factor * 1024**3) == factor
    assert sized_unit_value(factor) == factor


def test_mkdir_p_creates_nested(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    mkdir_p(str(target) + "/")
    assert target.is_dir()
    mkdir_p(str(target))  # existing is fine
    assert target.is_dir()


def test_create_path_creates_parents(tmp_path):
    filename = tmp_path / "x" / "y" / "file.bin"
    assert create_path(str(filename)) is True
    assert filename.parent.is_dir()
    assert not filename.exists()


def test_create_path_bare_filename(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert create_path("plain.txt") is True
    assert os.listdir(tmp_path) == []