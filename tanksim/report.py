"""Console table and run summary for a sequence of step records."""

from __future__ import annotations

import sys
from dataclasses import asdict
from typing import Iterable, Iterator, TextIO

import pandas as pd

from .models import StepRecord, StepStatus

BANNER = "Starting real-time tank filling simulation..."
FOOTER = "Simulation complete."
HEADER = "Time(s)   Water Level(m)   Flow Rate(m³/s)   Pump Power(W)"
SEPARATOR = "-" * 57

STATUS_MESSAGES = {
    StepStatus.PUMP_INSUFFICIENT: "Pump cannot overcome the head loss. No flow occurs.",
    StepStatus.OVERFLOW: "Tank is full! Overflow occurs.",
}

FRAME_COLUMNS = ["time", "water_level", "flow_rate", "pump_power", "status"]


def format_record(record: StepRecord) -> str:
    return (
        f"{record.time:.2f}       {record.water_level:.4f}          "
        f"{record.flow_rate:.4f}          {record.pump_power:.2f}"
    )


def render_lines(records: Iterable[StepRecord]) -> Iterator[str]:
    """Yield the table lines, each non-nominal row preceded by its status message."""
    yield HEADER
    yield SEPARATOR
    for record in records:
        message = STATUS_MESSAGES.get(record.status)
        if message is not None:
            yield message
        yield format_record(record)


def print_table(records: Iterable[StepRecord], stream: TextIO | None = None) -> list[StepRecord]:
    """Print the table as records arrive and return the records that were consumed."""
    out = stream or sys.stdout
    consumed: list[StepRecord] = []

    def _tap() -> Iterator[StepRecord]:
        for record in records:
            consumed.append(record)
            yield record

    print(BANNER, file=out)
    for line in render_lines(_tap()):
        print(line, file=out, flush=True)
    print(FOOTER, file=out)
    return consumed


def records_to_frame(records: Iterable[StepRecord]) -> pd.DataFrame:
    rows = []
    for record in records:
        row = asdict(record)
        row["status"] = record.status.value
        rows.append(row)
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def summarize(records: Iterable[StepRecord]) -> dict:
    frame = records_to_frame(records)
    status_counts = {status.value: 0 for status in StepStatus}
    if frame.empty:
        return {
            "steps": 0,
            "final_water_level": None,
            "peak_pump_power": None,
            "status_counts": status_counts,
            "first_overflow_time": None,
        }
    for status, count in frame["status"].value_counts().items():
        status_counts[str(status)] = int(count)
    overflow = frame.loc[frame["status"] == StepStatus.OVERFLOW.value, "time"]
    return {
        "steps": int(len(frame)),
        "final_water_level": float(frame["water_level"].iloc[-1]),
        "peak_pump_power": float(frame["pump_power"].max()),
        "status_counts": status_counts,
        "first_overflow_time": float(overflow.iloc[0]) if not overflow.empty else None,
    }
