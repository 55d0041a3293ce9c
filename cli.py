import argparse
import sys

from insights import InsightGenerator
from logger import configure_logging, get_logger
from summary import create_data_summary
from trafficlogs.errors import ParseError
from trafficlogs.ingest import parse_path, supported_formats
from trafficlogs.types import Severity
from views import (
    congestion_by_hour,
    events_by_device,
    hour_label,
    passage_by_lane,
    recent_logs,
    timeline_by_hour,
    traffic_flow_by_hour,
)


logger = get_logger("cli")

SHOWN_SEVERITIES = (Severity.ERROR, Severity.WARNING, Severity.INFO)


# ---------------- CLI ----------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Traffic Log Insights: ITS log and traffic data analyzer"
    )
    parser.add_argument("--format", required=True, choices=supported_formats())
    parser.add_argument("--file", required=True)
    parser.add_argument("--recent", type=int, default=20)
    parser.add_argument(
        "--insights",
        action="store_true",
        help="Ask the LLM for recommendations and root-cause analysis",
    )
    parser.add_argument("--log-level", default=None)

    return parser.parse_args(argv)


# ---------------- Report ----------------

def print_log_views(data, recent):
    print("\n=== EVENTS BY DEVICE ===")
    for row in events_by_device(data.logs):
        counts = "  ".join(f"{s.value}={row.get(s)}" for s in SHOWN_SEVERITIES)
        print(f"  {row.name:<20} {counts}")

    print("\n=== EVENT TIMELINE (BY HOUR) ===")
    for row in timeline_by_hour(data.logs):
        counts = "  ".join(f"{s.value}={row.get(s)}" for s in SHOWN_SEVERITIES)
        print(f"  {row.name:>6}  {counts}")

    print(f"\n=== RECENT LOG ENTRIES ({recent}) ===")
    for log in recent_logs(data.logs, limit=recent):
        print(f"  {log.timestamp:%Y-%m-%d %H:%M:%S}  {log.severity.value:<8} {log.device:<16} {log.message}")


def print_traffic_views(data):
    if data.passage:
        print("\n=== PASSAGE SUMMARY BY LANE ===")
        for lane in passage_by_lane(data.passage):
            print(f"  {lane.name:<8} vehicles={lane.vehicles:<6} revenue=${lane.revenue:.2f}")

    print("\n=== TRAFFIC FLOW BY HOUR ===")
    for row in traffic_flow_by_hour(data.passage, data.ivdc):
        print(f"  {hour_label(row.hour):>6}  vehicles={row.vehicles}")

    if data.ivdc:
        print("\n=== CONGESTION BY HOUR ===")
        for row in congestion_by_hour(data.ivdc):
            print(
                f"  {hour_label(row.hour):>6}  speed={row.speed:.1f} km/h"
                f"  occupancy={row.occupancy:.1f}%"
            )


def print_insights(data):
    generator = InsightGenerator.from_env()

    print("\n=== AI RECOMMENDATIONS ===")
    print(generator.recommendations(data))

    error_logs = generator.error_logs(data)
    if error_logs:
        print("\n=== ROOT-CAUSE ANALYSIS ===")
        print(generator.root_cause(error_logs))


# ---------------- Main ----------------

def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        data = parse_path(args.format, args.file)
    except (ParseError, OSError) as e:
        logger.debug("Parsing %s as %s failed", args.file, args.format, exc_info=True)
        print(f"Analysis failed: {e}", file=sys.stderr)
        return 1

    print("\nIngestion summary")
    print(f"  File          : {args.file}")
    print(f"  Format        : {args.format}")
    print(f"  Log entries   : {len(data.logs)}")
    print(f"  Passage rows  : {len(data.passage)}")
    print(f"  Detection rows: {len(data.ivdc)}")

    if data.logs:
        print_log_views(data, args.recent)
    if data.passage or data.ivdc:
        print_traffic_views(data)

    print()
    print(create_data_summary(data))

    if args.insights:
        print_insights(data)

    print("\nDone.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
