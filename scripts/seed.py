import argparse

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.session import engine, Session, init_db, drop_db

from app.db.seed import seed_all


def run_seed(*, reset: bool = False) -> None:
    if reset:
        drop_db()
    init_db()
    with Session(engine) as session:
        seed_all(session=session, seed_path=settings.SEED_PATH)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the tables and insert the task templates.")
    parser.add_argument("--reset", action="store_true", help="drop every table first (destroys all users)")
    args = parser.parse_args()

    setup_logging(settings.LOG_LEVEL)
    run_seed(reset=args.reset)
