import pytest

from terrainview.stg_object import StgObject

CONTENT = (
    "OBJECT_BASE 3039642.btg\n"
    "OBJECT LFLG.btg\n"
    "OBJECT_SHARED Models/tower.ac 5.1 45.2 200 0\n"
    "OBJECT LFLS.btg\n"
)


@pytest.fixture
def stg_file(tmp_path):
    path = tmp_path / "3039642.stg"
    path.write_text(CONTENT)
    return path


def test_base_object_with_base_path(stg_file):
    with StgObject(str(stg_file)) as stg:
        value = stg.get_value("OBJECT_BASE", True)
    assert value == str(stg_file.parent) + "/3039642.btg"


def test_value_without_base_path(stg_file):
    with StgObject(str(stg_file)) as stg:
        assert stg.get_value("OBJECT_BASE", False) == "3039642.btg"


def test_verb_must_be_followed_by_space(stg_file):
    with StgObject(str(stg_file)) as stg:
        assert stg.get_value("OBJECT", False) == "LFLG.btg"
        assert stg.get_value("OBJECT", False) == "LFLS.btg"
        assert stg.get_value("OBJECT", False) is None


def test_values_after_rewind(stg_file):
    with StgObject(str(stg_file)) as stg:
        assert stg.get_value("OBJECT", False) == "LFLG.btg"
        stg.rewind()
        assert list(stg.values("OBJECT", False)) == ["LFLG.btg", "LFLS.btg"]


def test_values_with_base(stg_file):
    with StgObject(str(stg_file)) as stg:
        base = stg.base_path
        assert list(stg.values("OBJECT")) == [base + "LFLG.btg", base + "LFLS.btg"]


def test_lookup_reads_forward(stg_file):
    with StgObject(str(stg_file)) as stg:
        assert stg.get_value("OBJECT", False) == "LFLG.btg"
        assert stg.get_value("OBJECT_BASE", False) is None


def test_missing_verb(stg_file):
    with StgObject(str(stg_file)) as stg:
        assert stg.get_value("NOTHING") is None


def test_last_line_without_newline(tmp_path):
    path = tmp_path / "t.stg"
    path.write_text("OBJECT_BASE tile.btg")
    with StgObject(str(path)) as stg:
        assert stg.get_value("OBJECT_BASE", False) == "tile.btg"


def test_filename_without_directory(tmp_path, monkeypatch):
    (tmp_path / "plain.stg").write_text("OBJECT_BASE tile.btg\n")
    monkeypatch.chdir(tmp_path)
    with StgObject("plain.stg") as stg:
        assert stg.base_path == ""
        assert stg.get_value("OBJECT_BASE", True) == "tile.btg"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        StgObject(str(tmp_path / "absent.stg"))


def test_closed_after_context(stg_file):
    with StgObject(str(stg_file)) as stg:
        pass
    assert stg.closed
    with pytest.raises(ValueError):
        stg.get_value("OBJECT")