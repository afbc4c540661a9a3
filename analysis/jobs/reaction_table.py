#!/usr/bin/env python3
import sys
import logging
import argparse
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional, Sequence

import pandas as pd

from collection.clients.reactions_api import ReactionsApiClient
from core.config import AppSettings
from core.logging import setup_json_logging
from service.errors import DependencyError
from service.reactions_service import load_reactions
from table.assembler import TableViewModel
from table.column_order import ColumnOrderModel
from table.columns import REACTION_COLUMNS, ColumnDef, get_column
from table.sorting import DEFAULT_SORT, SortDirection, SortState
from table.state import TableState

logger = logging.getLogger(__name__)

def parse_sort(value: str) -> Optional[SortState]:
    """Parse `column:asc|desc` or `none`"""
    if value.lower() == "none":
        return None
    column_id, _, direction = value.partition(":")
    try:
        return SortState(column_id=column_id, direction=SortDirection((direction or "asc").lower()))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid sort {value!r}, expected column:asc|desc or none")

def to_dataframe(view: TableViewModel, columns: Sequence[ColumnDef] = REACTION_COLUMNS) -> pd.DataFrame:
    """Render the view-model as a DataFrame, headers in view order"""
    accessors = [get_column(columns, h.id).accessor for h in view.headers]
    records = [[accessor(row) for accessor in accessors] for row in view.rows]
    return pd.DataFrame(records, columns=[h.label for h in view.headers])

def render(df: pd.DataFrame, fmt: str) -> str:
    if fmt == "csv":
        return df.to_csv(index=False)
    if fmt == "json":
        return df.to_json(orient="records", date_format="iso", indent=2)
    return df.to_string(index=False)

def build_state(order: Optional[List[str]], sort: Optional[SortState]) -> TableState:
    """Initial table state with the requested column order and sort applied"""
    state = replace(TableState.initial(REACTION_COLUMNS), sort=sort)
    if order is not None:
        state = replace(state, column_order=ColumnOrderModel(order=tuple(order)))
    return state

def main(argv=None) -> int:
    settings = AppSettings()

    parser = argparse.ArgumentParser(description="Export the reactions table")
    parser.add_argument("--sort", type=parse_sort, default=DEFAULT_SORT, help="column:asc|desc or none (default: createdAt:desc)")
    parser.add_argument("--order", help="Comma separated column ids (default: declaration order)")
    parser.add_argument("--format", choices=["csv", "json", "text"], default="text", help="Output format (default: text)")
    parser.add_argument("--out-file", help="Output file path (optional)")

    args = parser.parse_args(argv)

    setup_json_logging(settings.log_level_value)
    trace_id = f"reaction_table_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}"

    order = args.order.split(",") if args.order else None
    state = build_state(order, args.sort)

    try:
        with ReactionsApiClient() as client:
            reactions = load_reactions(client, trace_id=trace_id)
        view = state.view(reactions)
    except DependencyError as e:
        logger.error(f"Table job failed: {e.message}", extra={
            "trace_id": trace_id,
            "job": "reaction_table",
            "error_code": e.code
        })
        return 1
    except ValueError as e:
        logger.error(f"Invalid table request: {e}", extra={
            "trace_id": trace_id,
            "job": "reaction_table",
            "error_code": "INVALID_COLUMN"
        })
        return 2

    output = render(to_dataframe(view), args.format)

    logger.info("Table export completed", extra={
        "trace_id": trace_id,
        "job": "reaction_table",
        "rows": len(view.rows)
    })

    if args.out_file:
        with open(args.out_file, 'w', encoding='utf-8') as f:
            f.write(output)
        print(f"Results saved to {args.out_file}")
    else:
        print(output)
    return 0

if __name__ == "__main__":
    sys.exit(main())
