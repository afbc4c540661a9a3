#!/usr/bin/env python3
import sys
import logging
import argparse
import json
from datetime import datetime, timezone

from collection.clients.reactions_api import ReactionsApiClient
from core.config import AppSettings
from core.logging import setup_json_logging
from service.errors import DependencyError
from service.metrics_service import get_metrics

logger = logging.getLogger(__name__)

def build_output(metrics_dto, top_n: int) -> dict:
    """Wrap a metrics response with run metadata"""
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "params": {"top_n": top_n},
        "metrics": metrics_dto.metrics.model_dump(mode="json", by_alias=True),
    }

def main(argv=None) -> int:
    settings = AppSettings()

    parser = argparse.ArgumentParser(description="Compute summary metrics over all reactions")
    parser.add_argument("--top-n", type=int, default=settings.top_n, help=f"Top N entries per ranking (default: {settings.top_n})")
    parser.add_argument("--out-file", help="Output file path (optional)")

    args = parser.parse_args(argv)
    if args.top_n < 1:
        parser.error("--top-n must be positive")

    setup_json_logging(settings.log_level_value)
    trace_id = f"reaction_metrics_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}"

    try:
        with ReactionsApiClient() as client:
            metrics_dto = get_metrics(trace_id=trace_id, source=client, top_n=args.top_n)
    except DependencyError as e:
        logger.error(f"Metrics job failed: {e.message}", extra={
            "trace_id": trace_id,
            "job": "reaction_metrics",
            "error_code": e.code
        })
        return 1

    json_output = json.dumps(build_output(metrics_dto, args.top_n), indent=2, ensure_ascii=False)

    if args.out_file:
        with open(args.out_file, 'w', encoding='utf-8') as f:
            f.write(json_output)
        print(f"Results saved to {args.out_file}")
    else:
        print(json_output)
    return 0

if __name__ == "__main__":
    sys.exit(main())
