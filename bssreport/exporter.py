# bssreport/exporter.py
"""
Exporter: write report rows to a spreadsheet.
Standardised entrypoint: run(records, out_path).
"""
import logging
from dataclasses import astuple
from pathlib import Path
from typing import Sequence

import pandas as pd
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils.exceptions import IllegalCharacterError

from bssreport.config import OUTPUT_PATH
from bssreport.exceptions import ExportError
from bssreport.models import OutputRecord

LOG = logging.getLogger("bssreport.exporter")

SHEET_NAME = "Work Orders"
COLUMNS = [
    "Service Provider Reference",
    "Network Owner Reference",
    "Status",
    "Subscription Created At",
    "Work Order Completed At",
    "ONT Sent At",
]


def _clean(value):
    # control characters are legal in service strings but not in worksheet cells
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


def records_to_frame(records: Sequence[OutputRecord]) -> pd.DataFrame:
    rows = []
    for rec in records:
        row = list(astuple(rec))
        row[2] = rec.status.value
        rows.append([_clean(v) for v in row])
    return pd.DataFrame(rows, columns=COLUMNS)


def run(records: Sequence[OutputRecord], out_path: str | Path = OUTPUT_PATH) -> Path:
    """
    Write every record, header first. `.csv` paths get CSV, anything else xlsx.
    The file is written beside the target and renamed into place, so a failed
    write leaves no report behind.
    """
    out_file = Path(out_path)
    tmp_file = out_file.with_name(f".{out_file.name}.tmp")
    df = records_to_frame(records)
    try:
        out_file.parent.mkdir(parents=True, exist_ok=True)
        if out_file.suffix.lower() == ".csv":
            df.to_csv(tmp_file, index=False)
        else:
            df.to_excel(tmp_file, sheet_name=SHEET_NAME, index=False, engine="openpyxl")
        tmp_file.replace(out_file)
    except (OSError, ValueError, IllegalCharacterError) as e:
        if tmp_file.exists():
            tmp_file.unlink()
        raise ExportError(f"failed to save {out_file}: {e}") from e

    LOG.info("Exported %d rows -> %s", len(df), out_file)
    return out_file
