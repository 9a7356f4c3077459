import io

import pytest

from tanksim.models import StepRecord, StepStatus
from tanksim.playback import paced
from tanksim.report import HEADER, print_table, records_to_frame, render_lines, summarize


def _record(time, level, status=StepStatus.NOMINAL):
    return StepRecord(time=time, water_level=level, flow_rate=0.01, pump_power=981.0, status=status)


def test_rows_use_fixed_precision():
    lines = list(render_lines([_record(3.0, 0.0095493)]))
    assert lines[0] == HEADER
    assert lines[2] == "3.00       0.0095          0.0100          981.00"


def test_status_messages_precede_their_rows():
    records = [
        _record(0.0, 0.0, StepStatus.PUMP_INSUFFICIENT),
        _record(1.0, 5.0, StepStatus.OVERFLOW),
    ]
    lines = list(render_lines(records))[2:]
    assert lines[0] == "Pump cannot overcome the head loss. No flow occurs."
    assert lines[1].startswith("0.00")
    assert lines[2] == "Tank is full! Overflow occurs."
    assert lines[3].startswith("1.00       5.0000")


def test_print_table_returns_consumed_records():
    out = io.StringIO()
    consumed = print_table(iter([_record(0.0, 0.1), _record(1.0, 0.2)]), stream=out)
    text = out.getvalue().splitlines()
    assert text[0] == "Starting real-time tank filling simulation..."
    assert text[-1] == "Simulation complete."
    assert [record.time for record in consumed] == [0.0, 1.0]


def test_frame_and_summary():
    records = [
        _record(0.0, 4.9),
        _record(1.0, 5.0, StepStatus.OVERFLOW),
        _record(2.0, 5.0, StepStatus.OVERFLOW),
    ]
    frame = records_to_frame(records)
    assert list(frame.columns) == ["time", "water_level", "flow_rate", "pump_power", "status"]
    assert frame["status"].tolist() == ["NOMINAL", "OVERFLOW", "OVERFLOW"]

    summary = summarize(records)
    assert summary["steps"] == 3
    assert summary["final_water_level"] == 5.0
    assert summary["peak_pump_power"] == pytest.approx(981.0)
    assert summary["status_counts"] == {"NOMINAL": 1, "PUMP_INSUFFICIENT": 0, "OVERFLOW": 2}
    assert summary["first_overflow_time"] == 1.0


def test_summary_of_empty_run():
    summary = summarize([])
    assert summary["steps"] == 0
    assert summary["first_overflow_time"] is None


def test_paced_sleeps_between_records_only():
    delays = []
    out = list(paced([1, 2, 3], 0.5, sleep=delays.append))
    assert out == [1, 2, 3]
    assert delays == [0.5, 0.5]
