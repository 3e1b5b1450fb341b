import argparse
import logging
import sys

from spu_schedule.exceptions import SpuError
from spu_schedule.ical_export import calendar_to_ical, describe_services

from .app_factory import create_session, initialize_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seattle solid-waste collection schedule lookup.")
    parser.add_argument(
        "command",
        choices=["next", "schedule", "ical"],
        help="The command to execute.",
    )
    parser.add_argument("address", help="Street address, e.g. '700 5th Ave'.")
    parser.add_argument("--output", "-o", help="File to write the iCal export to (ical only).")
    parser.add_argument("--log-level", default=None, help="Logging level, e.g. DEBUG.")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    initialize_app(args.log_level)

    session = create_session(args.address)
    try:
        if args.command == "next":
            day = session.next_collection_day()
            print(f"{day.date}: {describe_services(day)}")
        elif args.command == "schedule":
            for day in session.calendar:
                print(f"{day.date}: {describe_services(day)}")
        elif args.command == "ical":
            content = calendar_to_ical(session.calendar, args.address)
            if args.output:
                with open(args.output, "wb") as f:
                    f.write(content)
                logger.info(f"Wrote iCal export to {args.output}")
            else:
                sys.stdout.write(content.decode("utf-8"))
    except SpuError as e:
        logger.error(f"{e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
