"""
Report rendering and export for commute records
"""

import csv
import json
from datetime import datetime, time
from pathlib import Path
from typing import List, Sequence

from rich.table import Table

from commutecalc.core.models import CommuteRecord

COLUMNS = ["City", "Arrive By 9am", "Depart House At", "Leave At 5pm", "Get Home By"]


class ReportExportError(Exception):
    """Report export error"""
    pass


def format_minutes(minutes: int) -> str:
    return f"{minutes} mins"


def format_clock(value: time) -> str:
    """12-hour clock time, e.g. '8:20 AM'"""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def records_to_rows(records: Sequence[CommuteRecord]) -> List[List[str]]:
    """Render records as display rows, in record order"""
    return [
        [
            record.city,
            format_minutes(record.minutes_to_arrive),
            format_clock(record.depart_house_at),
            format_minutes(record.minutes_to_return),
            format_clock(record.arrive_home_at),
        ]
        for record in records
    ]


def build_table(records: Sequence[CommuteRecord], title: str = "Worst-Case Commutes") -> Table:
    """Build the fixed-column commute table"""
    table = Table(title=title)
    table.add_column(COLUMNS[0], style="cyan")
    for column in COLUMNS[1:]:
        table.add_column(column, justify="right")

    for row in records_to_rows(records):
        table.add_row(*row)

    return table


def export_records(records: Sequence[CommuteRecord], output_path: Path) -> Path:
    """
    Export records to CSV or JSON, chosen by file extension

    Raises:
        ReportExportError: For unsupported extensions
    """
    output_path = Path(output_path)
    suffix = output_path.suffix.lower()
    if suffix not in (".csv", ".json"):
        raise ReportExportError(f"Unsupported export format: {suffix or output_path.name}")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    if suffix == ".csv":
        with open(output_path, 'w', newline='', encoding='utf-8') as csvfile:
            writer = csv.writer(csvfile)
            writer.writerow(COLUMNS)
            writer.writerows(records_to_rows(records))
    else:
        export_data = {
            'metadata': {
                'exported_at': datetime.now().isoformat(),
                'record_count': len(records),
            },
            'commutes': [record.model_dump(mode='json') for record in records],
        }
        with open(output_path, 'w', encoding='utf-8') as jsonfile:
            json.dump(export_data, jsonfile, indent=2)

    return output_path
