"""Tests for slot usage in grouptools classes."""

import grouptools as gt


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(gt.Seq(()))
    assert _check_slots(gt.Dict[str, str]({}))
    assert _check_slots(gt.Partition([], []))
    assert _check_slots(gt.get_config())
