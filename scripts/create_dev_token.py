"""Print a signed bearer token for local calls to the document types API.

Usage:
    python -m scripts.create_dev_token <project_id|-> [org_id] [--no-permission]

Pass "-" as project_id to issue an organization-only token. The token carries
sub=dev-user and, unless --no-permission is given, the configured read permission.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv

from app.core.config import get_settings
from app.infrastructure.security.jwt import create_access_token


def main() -> None:
    load_dotenv(Path(__file__).resolve().parent.parent / ".env", override=True)
    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    if not args:
        print(
            "Usage: python -m scripts.create_dev_token <project_id|-> [org_id] [--no-permission]",
            file=sys.stderr,
        )
        sys.exit(1)

    settings = get_settings()
    claims: dict[str, object] = {"sub": "dev-user"}
    if args[0] != "-":
        claims["project_id"] = args[0]
    if len(args) > 1:
        claims["org_id"] = args[1]
    if "--no-permission" not in sys.argv and settings.required_permission:
        claims["permissions"] = settings.required_permission
    print(create_access_token(claims))


if __name__ == "__main__":
    main()
