import pytest

from bloomcheck.filter.bit_store import BitStore
from bloomcheck.filter.errors import IndexOutOfRangeError


class TestBitStore:
    def test_starts_all_false(self):
        store = BitStore(20)
        assert len(store) == 20
        assert not any(store.get(i) for i in range(20))
        assert store.count() == 0

    def test_set_and_get(self):
        store = BitStore(20)
        store.set(0)
        store.set(9)
        store.set(19)
        assert store.get(0) and store.get(9) and store.get(19)
        assert not store.get(1)
        assert store.count() == 3

    def test_set_is_idempotent(self):
        store = BitStore(8)
        store.set(3)
        store.set(3)
        assert store.count() == 1

    def test_size_not_multiple_of_eight(self):
        store = BitStore(3)
        for i in range(3):
            store.set(i)
        assert store.count() == 3

    @pytest.mark.parametrize("index", [-1, 10, 11, 1000])
    def test_out_of_range(self, index):
        store = BitStore(10)
        with pytest.raises(IndexOutOfRangeError) as exc:
            store.set(index)
        assert exc.value.index == index
        assert exc.value.size == 10
        with pytest.raises(IndexOutOfRangeError):
            store.get(index)

    def test_out_of_range_is_index_error(self):
        """Callers can catch the builtin."""
        with pytest.raises(IndexError):
            BitStore(1).get(1)

    @pytest.mark.parametrize("index", [1.0, "1", None, True])
    def test_non_int_index_rejected(self, index):
        with pytest.raises(TypeError):
            BitStore(4).set(index)
