import pytest

from combovec.base import SequenceMixin


class _Seq(SequenceMixin):
    def __init__(self, *items):
        self.items = list(items)

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)


class _OtherSeq(_Seq):
    pass


def test_join_numbers():
    assert SequenceMixin.join(_Seq(1, 2, 3), ", ") == "1, 2, 3"


def test_join_strings():
    assert SequenceMixin.join(_Seq("hello", "world"), " ") == "hello world"


def test_join_empty():
    assert SequenceMixin.join(_Seq(), ", ") == ""


def test_is_empty():
    assert SequenceMixin.is_empty(_Seq()) is True
    assert SequenceMixin.is_empty(_Seq(1)) is False


def test_to_list_round_trip():
    seq = _Seq(4, 5, 6)
    result = SequenceMixin.to_list(seq)
    assert result == [4, 5, 6]
    result.append(7)
    assert seq.items == [4, 5, 6]


def test_equality():
    assert SequenceMixin.__eq__(_Seq(1, 2, 3), _Seq(1, 2, 3)) is True
    assert not SequenceMixin.__eq__(_Seq(1, 2, 3), _Seq(1, 2))
    assert _Seq(1, 2, 3) == _Seq(1, 2, 3)


def test_equality_with_other_types_is_false():
    assert SequenceMixin.__eq__(_Seq(1, 2, 3), [1, 2, 3]) in (False, NotImplemented)
    assert SequenceMixin.__eq__(_Seq(1), _OtherSeq(1)) in (False, NotImplemented)
    assert (_Seq(1, 2, 3) == [1, 2, 3]) is False
    assert (_Seq(1) == _OtherSeq(1)) is False


@pytest.mark.parametrize(
    "left, right",
    [((1, 2), (1, 3)), ((1, 2), (1, 2, 0)), ((), (0,)), ((0, 9), (1,))],
)
def test_lexicographic_ordering(left, right):
    a, b = _Seq(*left), _Seq(*right)
    assert SequenceMixin.__lt__(a, b)
    assert SequenceMixin.__le__(a, b)
    assert SequenceMixin.__gt__(b, a)
    assert SequenceMixin.__ge__(b, a)
    assert not SequenceMixin.__gt__(a, b)
    assert not SequenceMixin.__le__(b, a)


def test_ordering_equal_sequences():
    a, b = _Seq(1, 2), _Seq(1, 2)
    assert SequenceMixin.__le__(a, b)
    assert SequenceMixin.__ge__(a, b)
    assert not SequenceMixin.__lt__(a, b)
    assert not SequenceMixin.__gt__(a, b)


def test_ordering_with_other_type_raises():
    try:
        result = SequenceMixin.__lt__(_Seq(1), [2])
    except TypeError:
        result = NotImplemented
    assert result is NotImplemented
    with pytest.raises(TypeError):
        _Seq(1) < [2]  # noqa: B015


def test_str_lists_entries():
    assert SequenceMixin.__str__(_Seq(1, 2, 3)) == "[1, 2, 3]"
    assert SequenceMixin.__str__(_Seq()) == "[]"


def test_str_uses_repr_of_entries():
    assert SequenceMixin.__str__(_Seq("a")) == "['a']"


def test_unhashable():
    seq = _Seq(1)
    assert SequenceMixin.__eq__(seq, _Seq(1)) is True
    with pytest.raises(TypeError):
        hash(seq)