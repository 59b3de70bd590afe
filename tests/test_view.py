import pytest

from autoseq import AutoSequence, SequenceView


@pytest.fixture
def naturals():
    seq = AutoSequence(lambda n, h: n)
    seq.reserve(64)
    return seq


def test_view_is_a_sequence(naturals):
    view = naturals.slice(0, 10)
    assert isinstance(view, SequenceView)
    assert len(view) == 10
    assert view[-1] == 9
    assert 5 in view
    assert view.index(4) == 4
    assert view.count(1) == 1
    assert list(reversed(view))[:3] == [9, 8, 7]


def test_sub_slices_are_views(naturals):
    view = naturals.slice(2, 10)
    sub = view[1:4]
    assert isinstance(sub, SequenceView)
    assert sub == [3, 4, 5]
    assert sub[1:] == (4, 5)
    assert view[5:2] == []
    assert view[::3] == [2, 5, 8]
    assert isinstance(view[::3], list)


def test_equality(naturals):
    view = naturals.slice(0, 3)
    assert view == [0, 1, 2]
    assert [0, 1, 2] == view
    assert view == naturals.slice(0, 3)
    assert view != [0, 1]
    assert view != [0, 1, 3]
    assert view != "012"


def test_out_of_range_index_is_a_precondition(naturals):
    view = naturals.slice(0, 3)
    with pytest.raises(AssertionError):
        view[3]
    with pytest.raises(AssertionError):
        view[-4]


def test_view_survives_growth_within_capacity(naturals):
    view = naturals.slice(0, 3)
    naturals.prefetch_up_to(40)
    assert view.valid
    assert view.tolist() == [0, 1, 2]


def test_view_goes_stale_on_reallocation(naturals):
    view = naturals.slice(0, 3)
    naturals.prefetch_up_to(100)
    assert not view.valid
    assert repr(view) == "SequenceView(<stale>, len=3)"
    with pytest.raises(AssertionError):
        view[0]
    with pytest.raises(AssertionError):
        list(view)
    with pytest.raises(AssertionError):
        view.tolist()


def test_view_goes_stale_on_move_snapshot(naturals):
    naturals.prefetch_up_to(4)
    view = naturals.view()
    naturals.snapshot(move=True)
    assert not view.valid


def test_views_are_read_only(naturals):
    view = naturals.slice(0, 3)
    with pytest.raises(TypeError):
        view[0] = 5
    with pytest.raises(AttributeError):
        view.append(5)


def test_index_of_missing_value(naturals):
    view = naturals.slice(0, 5)
    assert view.index(3, 1) == 3
    assert view.index(3, -3) == 3
    assert view.index(4, -1) == 4
    with pytest.raises(ValueError):
        view.index(1, -3)
    with pytest.raises(ValueError):
        view.index(3, 0, -2)
    with pytest.raises(ValueError):
        view.index(42)
