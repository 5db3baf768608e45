"""Create or promote the founder administrator account."""

import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app import create_app  # noqa: E402
from models import db  # noqa: E402
from models.account import Account  # noqa: E402


def main() -> None:
    app = create_app()
    with app.app_context():
        email = app.config["FOUNDER_EMAIL"].strip().lower()
        password = os.environ.get("ADMIN_PASSWORD")
        if not password:
            raise SystemExit("Set ADMIN_PASSWORD to seed the admin account.")

        admin = Account.query.filter_by(email=email).first()
        if admin is None:
            admin = Account(name=os.environ.get("ADMIN_NAME", "Founder"), email=email, is_admin=True)
            admin.set_password(password)
            db.session.add(admin)
            action = "created"
        else:
            admin.is_admin = True
            admin.set_password(password)
            action = "updated"
        db.session.commit()
        print(f"Admin account {action}: {email}")


if __name__ == "__main__":
    main()
