"""Tests for the Seq and Dict wrappers."""

from collections.abc import Iterator, Mapping, Sequence

import pytest

import grouptools as gt


@pytest.fixture
def small_repr() -> Iterator[gt.Config]:
    cfg = gt.get_config()
    previous = cfg.max_items
    cfg.max_items = 3
    yield cfg
    cfg.max_items = previous


class TestSeq:
    """Seq construction and protocol."""

    def test_is_sequence(self) -> None:
        """Test that Seq behaves as a standard sequence."""
        seq = gt.Seq([1, 2, 3])
        assert isinstance(seq, Sequence)
        assert len(seq) == 3
        assert seq[0] == 1
        assert list(seq[1:]) == [2, 3]
        assert 2 in seq
        assert list(reversed(seq)) == [3, 2, 1]

    def test_copies_input(self) -> None:
        """Test that later changes to the source list are not seen."""
        data = [1, 2]
        seq = gt.Seq(data)
        data.append(3)
        assert list(seq) == [1, 2]
        assert seq.inner() == (1, 2)

    def test_from_values(self) -> None:
        """Test building from unpacked values and from an iterable."""
        assert gt.Seq.from_(1, 2, 3).inner() == (1, 2, 3)
        assert gt.Seq.from_(range(3)).inner() == (0, 1, 2)

    def test_new_is_empty(self) -> None:
        """Test the empty constructor."""
        assert gt.Seq[int].new().length() == 0

    def test_repr(self) -> None:
        """Test the default repr."""
        assert repr(gt.Seq([1, "a"])) == "Seq(1, 'a')"
        assert repr(gt.Seq.new()) == "Seq()"

    def test_repr_truncates(self, small_repr: gt.Config) -> None:
        """Test that the configured max_items truncates the repr."""
        assert small_repr.max_items == 3
        assert repr(gt.Seq(range(10))) == "Seq(0, 1, 2, ...)"
        assert repr(gt.Seq(range(3))) == "Seq(0, 1, 2)"


class TestSeqOperations:
    """Seq methods agree with the free functions."""

    def test_group_by(self) -> None:
        """Test that Seq.group_by wraps group_by."""
        data = [{"age": 25}, {"age": 30}, {"age": 25}]
        result = gt.Seq(data).group_by("age")
        assert isinstance(result, gt.Dict)
        assert result == gt.group_by(data, "age")

    def test_partition(self) -> None:
        """Test that Seq.partition wraps partition."""
        data = [1, 2, 3, 4, 5]
        assert gt.Seq(data).partition(lambda x: x > 2) == gt.partition(
            data, lambda x: x > 2
        )

    def test_chunk(self) -> None:
        """Test that Seq.chunk wraps chunk, with Seq chunks."""
        result = gt.Seq(range(7)).chunk(3)
        assert all(isinstance(c, gt.Seq) for c in result)
        assert [list(c) for c in result] == gt.chunk(range(7), 3)

    def test_chunk_invalid_size(self) -> None:
        """Test that Seq.chunk validates the size."""
        with pytest.raises(gt.InvalidArgumentError):
            gt.Seq([1]).chunk(0)

    def test_into_and_inspect(self) -> None:
        """Test piping through into and inspect."""
        seen: list[int] = []
        total = (
            gt.Seq([3, 1, 2])
            .inspect(lambda s: seen.append(s.length()))
            .into(lambda s: sum(s))
        )
        assert total == 6
        assert seen == [3]

    def test_into_extra_arguments(self) -> None:
        """Test that into forwards extra arguments."""

        def _chunk_count(seq: gt.Seq[int], size: int) -> int:
            return len(seq.chunk(size))

        assert gt.Seq(range(10)).into(_chunk_count, 4) == 3


class TestDict:
    """Dict wrapper behaviour."""

    def test_is_mapping(self) -> None:
        """Test that Dict behaves as a standard mapping."""
        d = gt.Dict({"a": 1, "b": 2})
        assert isinstance(d, Mapping)
        assert d["a"] == 1
        assert list(d) == ["a", "b"]
        assert len(d) == 2
        assert d == {"a": 1, "b": 2}

    def test_from_pairs(self) -> None:
        """Test building from an iterable of pairs."""
        assert gt.Dict.from_([("x", 1)]).inner() == {"x": 1}

    def test_keys_and_values(self) -> None:
        """Test the key and value views as Seq."""
        grouped = gt.Seq(["b", "a", "bb"]).group_by(len)
        assert grouped.keys_seq().inner() == ("1", "2")
        assert grouped.values_seq().inner() == (["b", "a"], ["bb"])

    def test_map_values(self) -> None:
        """Test transforming bucket contents."""
        counts = gt.Seq(["cat", "mouse", "dog"]).group_by(len).map_values(len)
        assert counts.inner() == {"3": 2, "5": 1}

    def test_repr_keeps_insertion_order(self) -> None:
        """Test that the repr does not sort keys."""
        assert repr(gt.Dict({"z": 1, "a": 2})) == "{'z': 1, 'a': 2}"

    def test_repr_truncates(self, small_repr: gt.Config) -> None:
        """Test that the configured max_items truncates the repr."""
        assert small_repr.max_items == 3
        d = gt.Dict({i: i for i in range(5)})
        assert repr(d) == "{0: 0, 1: 1, 2: 2}..."
