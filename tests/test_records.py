import pytest
from pydantic import ValidationError

from gridclock.records import HalfRecord, QuarterRecord
from gridclock.time.half import Half, HalfType
from gridclock.time.quarter import Quarter, QuarterType


def test_live_quarter_always_exports():
    q = Quarter(QuarterType.FOURTH)
    for v in (-100, 0, 42, 900, 5000):
        q.time_remaining = v
        rec = q.to_record()
        assert rec.time_remaining == q.time_remaining
        assert rec.quarter_type is QuarterType.FOURTH


@pytest.mark.parametrize("value", [-1, 901])
def test_out_of_range_record_rejected(value):
    with pytest.raises(ValidationError):
        QuarterRecord(quarter_type=QuarterType.FIRST, time_remaining=value)


def test_half_record_sums_quarters():
    h = Half(HalfType.FIRST)
    h.quarters[0].time_remaining = 300
    rec = h.to_record()
    assert rec.time_remaining == 1200
    assert rec.model_dump()["time_remaining"] == 1200
    assert [q.quarter_type for q in rec.quarters] == [QuarterType.FIRST, QuarterType.SECOND]


def test_half_record_needs_two_quarters():
    one = QuarterRecord(quarter_type=QuarterType.THIRD, time_remaining=900)
    with pytest.raises(ValidationError):
        HalfRecord(half_type=HalfType.SECOND, quarters=[one])


def test_record_round_trips_through_json():
    rec = Half(HalfType.SECOND).to_record()
    back = HalfRecord.model_validate_json(rec.model_dump_json())
    assert back.half_type is HalfType.SECOND
    assert back.time_remaining == 1800
