"""Initialize the database - creates all tables and the first admin account."""
import argparse
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import SessionLocal, engine, Base
import app.models  # noqa: F401 - registers all models
from app.models.admin_user import AdminUser
from app.services.auth_service import hash_password


def init_db(username: str | None = None, email: str | None = None, password: str | None = None):
    print("Creating all database tables...")
    Base.metadata.create_all(bind=engine)
    print("Database initialized successfully.")

    if not username:
        return
    db = SessionLocal()
    try:
        if db.query(AdminUser).filter(AdminUser.username == username).first():
            print(f"Admin '{username}' already exists. Skipping.")
            return
        db.add(AdminUser(
            username=username,
            email=email or f"{username}@sonaverse.kr",
            role="admin",
            password_hash=hash_password(password),
            is_active=True,
        ))
        db.commit()
        print(f"Admin '{username}' created.")
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create tables and optionally the first admin account.")
    parser.add_argument("--username", help="admin username to create")
    parser.add_argument("--email", help="admin email (default: <username>@sonaverse.kr)")
    parser.add_argument("--password", help="admin password (min 8 chars)")
    args = parser.parse_args()
    if args.username and not args.password:
        parser.error("--password is required with --username")
    init_db(args.username, args.email, args.password)
