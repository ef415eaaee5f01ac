"""
Tests for the in-place work queue.
"""

from norlogic.support.queue import InPlaceQueue


class TestInPlaceQueue:
    """Test the processed/unprocessed discipline."""

    def test_empty(self):
        q = InPlaceQueue([])
        assert not q.has_unprocessed()
        assert q.take_unprocessed() is None

    def test_take_all(self):
        items = [1, 2, 3, 4]
        q = InPlaceQueue(items)
        taken = []
        while (x := q.take_unprocessed()) is not None:
            taken.append(x)
        assert sorted(taken) == [1, 2, 3, 4]
        assert items == []

    def test_processed_keep_insertion_order(self):
        items = ['a', 'b', 'c']
        q = InPlaceQueue(items)
        for x in ['p', 'q', 'r']:
            q.add_processed(x)
        assert items[:3] == ['p', 'q', 'r']
        assert q.processed_count == 3
        assert sorted(items[3:]) == ['a', 'b', 'c']

    def test_interleaved(self):
        items = [5, 2, 8]
        q = InPlaceQueue(items)
        order = []
        while q.has_unprocessed():
            x = q.take_unprocessed()
            order.append(x)
            q.add_processed(10 * x)
        assert items == [10 * x for x in order]

    def test_requeue_is_processed_later(self):
        # Split numbers greater than one into halves until all are ones.
        items = [4, 1, 2]
        q = InPlaceQueue(items)
        while q.has_unprocessed():
            x = q.take_unprocessed()
            if x > 1:
                q.add_unprocessed(x // 2)
                q.add_unprocessed(x // 2)
            else:
                q.add_processed(x)
        assert items == [1] * 7

    def test_none_elements(self):
        items = [None, 1, None]
        q = InPlaceQueue(items)
        taken = []
        while q.has_unprocessed():
            x = q.take_unprocessed()
            taken.append(x)
            q.add_processed(x)
        assert taken.count(None) == 2
        assert items == taken
        assert q.take_unprocessed() is None

    def test_extend_processed(self):
        items = [0]
        q = InPlaceQueue(items)
        assert q.take_unprocessed() == 0
        q.extend_processed([3, 1, 2])
        assert items == [3, 1, 2]
        assert not q.has_unprocessed()

    def test_in_place_endo_map(self):
        items = list(range(10))
        alias = items
        InPlaceQueue.in_place_endo_map(items, lambda x: x * x)
        assert alias is items
        assert sorted(items) == [x * x for x in range(10)]
