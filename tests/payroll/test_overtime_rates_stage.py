from datetime import time

from src.wage_calculator.wage_calculator.payroll.model import ShiftSegment
from src.wage_calculator.wage_calculator.payroll.stages.overtime_rates import OvertimeRatesStage
from src.wage_calculator.wage_calculator.rates.model import OvertimeTier, RegularRate, RegularRatePeriod
from src.wage_calculator.wage_calculator.rates.schedule import RateSchedule


def _schedule(*tiers: OvertimeTier, rates=(RegularRate(0, 0),)) -> RateSchedule:
    return RateSchedule.from_entries(list(rates), list(tiers))


def _segment(minutes: int, rate_by_100: int = 0) -> ShiftSegment:
    return ShiftSegment(period=RegularRatePeriod.of(rate_by_100, time(0), time(0)), minutes=minutes)


def test_no_overtime_pays_base_rate():
    stage = OvertimeRatesStage(_schedule(), base_rate_by_100=100)

    stage.accept(_segment(8 * 60))

    assert stage.flush() == [800]


def test_zero_rates_pay_nothing():
    stage = OvertimeRatesStage(_schedule(OvertimeTier.after(4, percent=100)), base_rate_by_100=0)

    stage.accept(_segment(8 * 60))

    assert stage.flush() == [0]


def test_single_tier_applies_after_threshold():
    stage = OvertimeRatesStage(_schedule(OvertimeTier.after(4, percent=100)), base_rate_by_100=100)

    stage.accept(_segment(8 * 60))

    assert stage.flush() == [400 + 800]


def test_hours_under_threshold_are_regular():
    stage = OvertimeRatesStage(_schedule(OvertimeTier.after(4, percent=100)), base_rate_by_100=100)

    stage.accept(_segment(2 * 60))

    assert stage.flush() == [200]


def test_tiers_cascade_within_one_segment():
    stage = OvertimeRatesStage(
        _schedule(OvertimeTier.after(4, percent=12), OvertimeTier.after(6, percent=34)),
        base_rate_by_100=100,
    )

    stage.accept(_segment(8 * 60))

    assert stage.flush() == [400 + 224 + 268]


def test_tiers_stack_on_top_of_regular_rates():
    schedule = _schedule(
        OvertimeTier.after(4, percent=20),
        OvertimeTier.after(6, percent=30),
        rates=(RegularRate(10 * 60, 0), RegularRate(15 * 60, 50)),
    )
    stage = OvertimeRatesStage(schedule, base_rate_by_100=100)

    stage.accept(ShiftSegment(schedule.periods[1], 180))
    stage.accept(ShiftSegment(schedule.periods[2], 240))

    # 3h at 1.00, 1h at 1.50, 2h at 1.70, 1h at 1.80
    assert stage.flush() == [300 + 150 + 340 + 180]


def test_day_amount_is_rounded_half_up():
    stage = OvertimeRatesStage(_schedule(), base_rate_by_100=0)

    stage.accept(_segment(30, rate_by_100=1))

    assert stage.flush() == [1]


def test_percent_of_base_rate_is_rounded_half_up():
    # 25% of 3.75 is 0.9375, paid as 0.94
    stage = OvertimeRatesStage(_schedule(OvertimeTier(0, 25)), base_rate_by_100=375)

    stage.accept(_segment(60))

    assert stage.flush() == [469]


def test_flush_without_segments_is_empty():
    stage = OvertimeRatesStage(_schedule(), base_rate_by_100=100)

    assert stage.flush() == []


def test_each_day_starts_below_thresholds():
    stage = OvertimeRatesStage(_schedule(OvertimeTier.after(4, percent=100)), base_rate_by_100=100)
    stage.accept(_segment(8 * 60))
    stage.flush()

    stage.accept(_segment(2 * 60))

    assert stage.close() == [200]
