import argparse
import sys

from resumehub.app import configure_logging
from resumehub.config import Config
from resumehub.db import MongoStore
from resumehub.errors import ConflictError
from resumehub.services import user_service
from resumehub.services.password_service import PasswordHasher


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the ResumeHub admin account")
    parser.add_argument("--email", default=None, help=f"defaults to {Config.DEFAULT_ADMIN_EMAIL}")
    parser.add_argument("--password", default=None)
    parser.add_argument("--name", default=None)
    args = parser.parse_args(argv)

    configure_logging()
    print(f"Connecting to {Config.MONGO_URI}...")
    with MongoStore.connect(Config.MONGO_URI, Config.DB_NAME) as store:
        status = user_service.admin_status(store)
        if status["adminExists"]:
            print("ℹ️ Admin user already exists, nothing to do.")
            return 0
        try:
            result = user_service.create_admin(
                store, PasswordHasher(Config.BCRYPT_ROUNDS),
                email=args.email, password=args.password, name=args.name,
            )
        except ConflictError as e:
            print(f"❌ {e.message}")
            return 1
    print(f"✅ Admin created: {result['email']} (id {result['id']})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
