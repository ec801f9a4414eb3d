import pytest

from lalib.matrix import EMPTY, Matrix
from lalib.matrix.errors import UnsetMatrixError
from lalib.session import Session


def test_new_session_has_unset_slots():
    session = Session()
    assert session.get("A") is EMPTY
    assert session.get("b") is EMPTY
    assert session.product is EMPTY


def test_store_replaces_slot():
    session = Session()
    matrix = Matrix.from_rows([[1, 2]])
    session.store("a", matrix)
    assert session.a == matrix
    assert session.get("A") == matrix
    assert session.b is EMPTY


def test_require_raises_for_unset_slot():
    with pytest.raises(UnsetMatrixError) as excinfo:
        Session().require("b")
    assert excinfo.value.slot == "B"
    assert "matrix B has not been input" in str(excinfo.value)


def test_unknown_slot():
    with pytest.raises(KeyError):
        Session().get("C")


def test_items_lists_both_slots():
    session = Session(a=Matrix.from_rows([[1]]))
    assert [slot for slot, _ in session.items()] == ["A", "B"]
