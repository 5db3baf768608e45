"""Insert the sample tutor profile, skipping it when already present."""

import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app import create_app  # noqa: E402
from utils.seed import ensure_sample_tutor  # noqa: E402


def main() -> None:
    app = create_app()
    with app.app_context():
        tutor = ensure_sample_tutor(email=os.environ.get("TUTOR_EMAIL"))
        if tutor is None:
            print("Tutor already exists (skipped).")
        else:
            print(f"Inserted tutor with id {tutor.id}")


if __name__ == "__main__":
    main()
