#!/usr/bin/env python
"""Seed script to create the admin account.

The API seeds the admin on startup as well; this script does the same thing
without starting the server, e.g. right after provisioning a fresh database.

Usage:
    python backend/scripts/seed_admin.py

Environment Variables:
    DATABASE_URL: SQLAlchemy connection string (default: sqlite:///./lostify.db)
    PASSWORD_PEPPER: Password hashing pepper (required)
    ADMIN_USERNAME: Username for the admin account (required)
    ADMIN_EMAIL: Email for the admin account (required)
    ADMIN_PASSWORD: Password for the admin account (required)
"""

import sys

from lostify.auth.password import validate_password_strength
from lostify.auth.service import seed_admin_user
from lostify.config import get_settings
from lostify.database import get_db_session, init_db


def main():
    """Create the configured admin user."""
    settings = get_settings()

    if not settings.admin_configured:
        print("ERROR: ADMIN_USERNAME, ADMIN_EMAIL and ADMIN_PASSWORD are required")
        print("Example: ADMIN_USERNAME=admin ADMIN_EMAIL=admin@sst.scaler.com "
              "ADMIN_PASSWORD='Adm1n!pass' python seed_admin.py")
        sys.exit(1)

    is_valid, error_msg = validate_password_strength(settings.ADMIN_PASSWORD)
    if not is_valid:
        print(f"ERROR: Password does not meet strength requirements: {error_msg}")
        sys.exit(1)

    init_db()

    try:
        with get_db_session() as session:
            admin_user = seed_admin_user(session, settings)
            if admin_user is None:
                print(f"Admin user {settings.ADMIN_USERNAME} already exists, nothing to do")
                return

            print("SUCCESS: Admin user created")
            print(f"  ID:       {admin_user.id}")
            print(f"  Username: {admin_user.username}")
            print(f"  Email:    {admin_user.email}")
            print(f"  Role:     {admin_user.role}")

    except Exception as e:
        print(f"ERROR: Failed to create admin user: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
