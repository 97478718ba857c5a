"""Console reporting helpers for the session scenarios."""
from __future__ import annotations

from typing import List, Sequence

import pandas as pd

from .models import NOT_FOUND, Record

_HOTEL_COLUMNS = {"name": "Hotel Name", "price": "Price", "rating": "Rating"}


def _single_line(value: str) -> str:
    return " ".join(value.split()) or NOT_FOUND


def format_product_listing(search_term: str, records: Sequence[Record]) -> str:
    """Return a numbered list of product records."""

    lines: List[str] = [
        "",
        f'AMAZON SEARCH RESULTS for "{search_term}"',
        "=======================",
    ]
    for index, record in enumerate(records, start=1):
        lines.append("")
        lines.append(f"#{index} {record.get('title', NOT_FOUND)}")
        lines.append(f"   Price: {record.get('price', NOT_FOUND)}")
        lines.append(f"   Rating: {record.get('rating', NOT_FOUND)}")
        lines.append("   " + "-" * 50)
    lines.append("")
    lines.append(f'Found {len(records)} products for "{search_term}"')
    return "\n".join(lines)


def hotels_to_dataframe(records: Sequence[Record]) -> pd.DataFrame:
    """Convert hotel records into a numbered :class:`~pandas.DataFrame`."""

    rows = []
    for index, record in enumerate(records, start=1):
        row = {"#": index}
        for field, column in _HOTEL_COLUMNS.items():
            row[column] = _single_line(record.get(field, NOT_FOUND))
        rows.append(row)
    return pd.DataFrame.from_records(rows, columns=["#", *_HOTEL_COLUMNS.values()])


def format_hotel_table(records: Sequence[Record]) -> str:
    """Return hotel records as a plain-text table."""

    lines: List[str] = ["", "Search Results:", "=================="]
    df = hotels_to_dataframe(records)
    if df.empty:
        lines.append("No hotels found")
    else:
        lines.append(df.to_string(index=False))
    lines.append("")
    lines.append(f"Found {len(records)} hotels")
    return "\n".join(lines)


def format_page_capture(records: Sequence[Record]) -> str:
    """Return the captured page source."""

    if not records:
        return "No page content retrieved"
    record = records[0]
    return "\n".join(
        [
            f"Page content retrieved from {record.get('url', NOT_FOUND)}:",
            record.get("html", NOT_FOUND),
        ]
    )
