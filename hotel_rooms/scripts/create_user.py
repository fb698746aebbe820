"""
Register a user without going through the app. Run from project root:
  python -m hotel_rooms.scripts.create_user USERNAME PASSWORD FULLNAME
Example:
  python -m hotel_rooms.scripts.create_user ivan secret "Иван Иванов"
"""
import argparse
import sys

from hotel_rooms.core.schema import SchemaInitializationError
from hotel_rooms.main import build_hotel_service
from hotel_rooms.services.repository import UsernameTakenError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a hotel app user.")
    parser.add_argument("username", help="Login name (must be unique)")
    parser.add_argument("password", help="Password (stored as entered)")
    parser.add_argument("fullname", help="Display name")
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username:
        print("Username must not be empty.", file=sys.stderr)
        return 1

    try:
        service = build_hotel_service()
    except SchemaInitializationError as e:
        print(f"Database setup failed: {e.message}", file=sys.stderr)
        return 1

    try:
        service.register(username, args.password, args.fullname)
    except UsernameTakenError as e:
        print(e.message, file=sys.stderr)
        return 1
    print(f"Created user '{username}' ({args.fullname}).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
