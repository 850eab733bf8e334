"""Utility script to seed the database with participants and an activity."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.activities import create_activity, link_participant
from app.application.use_cases.participants import create_participant
from app.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for seeding."""

    parser = argparse.ArgumentParser(
        description="Create participants and, optionally, an activity linking them.",
    )
    parser.add_argument(
        "--participant",
        action="append",
        default=[],
        metavar="NAME",
        help="Participant name to create. Repeat the flag to create several.",
    )
    parser.add_argument("--type", dest="activity_type", help="Activity type, e.g. event")
    parser.add_argument("--description", default="", help="Activity description")
    parser.add_argument("--date", default="", help="Activity date (YYYY-MM-DD)")
    parser.add_argument("--time", default="", help="Activity time (HH:MM)")
    parser.add_argument("--duration", default="", help="Activity duration in minutes")
    parser.add_argument(
        "--link",
        action="store_true",
        help="Link every created participant to the created activity.",
    )
    return parser.parse_args()


def main() -> None:
    """Seed the database using the provided command line arguments."""

    args = parse_args()
    if args.link and not args.activity_type:
        raise SystemExit("--link requires an activity (use --type and friends).")

    initialize_database()

    session = SessionLocal()
    try:
        participants = [create_participant(session, name=name) for name in args.participant]
        for participant in participants:
            print(f"Participant created: {participant.id} ({participant.name})")

        if args.activity_type:
            activity = create_activity(
                session,
                activity_type=args.activity_type,
                description=args.description,
                date=args.date,
                time=args.time,
                duration=args.duration,
            )
            if args.link:
                for participant in participants:
                    activity = link_participant(
                        session, activity_id=activity.id, participant_id=participant.id
                    )
            print(
                "Activity created:\n"
                f"  ID: {activity.id}\n"
                f"  Type: {activity.activity_type}\n"
                f"  Participants: {len(activity.participants)}"
            )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not seed the database: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while seeding: {exc}") from exc
    finally:
        session.close()


if __name__ == "__main__":
    main()
