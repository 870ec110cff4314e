import string

from hypothesis import given
from hypothesis import strategies as st

from sortbench.mergesort import merge, mergesort


@given(st.lists(st.integers()))
def test_mergesort_sorts_whole_list(values):
    items = list(values)
    mergesort(items)
    assert items == sorted(values)


@given(st.lists(st.text(alphabet=string.ascii_lowercase, min_size=1, max_size=8)))
def test_mergesort_sorts_words(words):
    items = list(words)
    mergesort(items, 0, len(items) - 1)
    assert items == sorted(words)


@given(st.lists(st.integers(), min_size=2))
def test_mergesort_subrange_leaves_rest(values):
    items = list(values)
    left, right = 1, len(items) - 1
    mergesort(items, left, right)
    assert items[0] == values[0]
    assert items[left:] == sorted(values[left:])


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_merge_combines_sorted_runs(first, second):
    items = sorted(first) + sorted(second)
    mid = len(first) - 1
    merge(items, 0, mid, len(items) - 1)
    assert items == sorted(first + second)