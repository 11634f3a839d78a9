from pathlib import Path

import pandas as pd
import pytest

from bssreport import exporter
from bssreport.exceptions import ExportError
from bssreport.models import LifecycleStatus, OutputRecord

RECORDS = [
    OutputRecord("SP-1", "NO-1", LifecycleStatus.CANCELLED, "2024-01-15 13:00:00 CET", "-"),
    OutputRecord("SP-2", "NO-2", LifecycleStatus.ACTIVATED, "2024-07-01 10:30:00 CEST",
                 "2024-07-03 12:00:00 CEST", "2024-07-02 08:00:00 CEST"),
]


def test_frame_columns_and_values():
    df = exporter.records_to_frame(RECORDS)
    assert list(df.columns) == exporter.COLUMNS
    assert df["Status"].tolist() == ["Cancelled", "Activated, ONT discovered"]
    assert df["ONT Sent At"].tolist() == ["-", "2024-07-02 08:00:00 CEST"]


def test_writes_workbook(tmp_path):
    out = exporter.run(RECORDS, tmp_path / "output.xlsx")
    df = pd.read_excel(out, sheet_name="Work Orders", engine="openpyxl")
    assert list(df.columns) == [
        "Service Provider Reference",
        "Network Owner Reference",
        "Status",
        "Subscription Created At",
        "Work Order Completed At",
        "ONT Sent At",
    ]
    assert df["Service Provider Reference"].tolist() == ["SP-1", "SP-2"]
    assert df.loc[1, "Status"] == "Activated, ONT discovered"


def test_empty_report_has_header_only(tmp_path):
    out = exporter.run([], tmp_path / "output.xlsx")
    df = pd.read_excel(out, sheet_name="Work Orders", engine="openpyxl")
    assert list(df.columns) == exporter.COLUMNS
    assert len(df) == 0


def test_csv_output(tmp_path):
    out = exporter.run(RECORDS, tmp_path / "reports" / "output.csv")
    df = pd.read_csv(out)
    assert df["Network Owner Reference"].tolist() == ["NO-1", "NO-2"]


def test_unwritable_path(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    with pytest.raises(ExportError):
        exporter.run(RECORDS, blocker / "output.xlsx")


def test_control_characters_are_stripped(tmp_path):
    records = [OutputRecord("SP-\x0b2", "NO-\x002", LifecycleStatus.PROVIDED, "-", "-")]
    out = exporter.run(records, tmp_path / "output.xlsx")
    df = pd.read_excel(out, sheet_name="Work Orders", engine="openpyxl")
    assert df["Service Provider Reference"].tolist() == ["SP-2"]
    assert df["Network Owner Reference"].tolist() == ["NO-2"]


def test_failed_write_leaves_no_file(tmp_path, monkeypatch):
    from openpyxl.utils.exceptions import IllegalCharacterError

    def half_write(self, path, **kwargs):
        Path(path).write_bytes(b"PK\x03\x04partial")
        raise IllegalCharacterError("bad cell")

    monkeypatch.setattr(pd.DataFrame, "to_excel", half_write)
    out = tmp_path / "output.xlsx"
    with pytest.raises(ExportError, match="bad cell"):
        exporter.run(RECORDS, out)
    assert list(tmp_path.iterdir()) == []


def test_existing_report_survives_failed_write(tmp_path, monkeypatch):
    out = tmp_path / "output.xlsx"
    exporter.run(RECORDS, out)
    before = out.read_bytes()

    def fail(self, path, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(pd.DataFrame, "to_excel", fail)
    with pytest.raises(ExportError):
        exporter.run(RECORDS[:1], out)
    assert out.read_bytes() == before
