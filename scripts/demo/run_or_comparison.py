"""
Send the same broken request to both routes and print what comes back.

The body is valid except for `data.baz`. `/safe-or` points at `baz`;
`/dangerous-or` reports against every field of both variants.

Run (from repo root):
  python scripts/demo/run_or_comparison.py
  python scripts/demo/run_or_comparison.py --baz e        # valid body, both routes return 200
  python scripts/demo/run_or_comparison.py --detailed     # include offending values
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from uuid import uuid4

from dotenv import load_dotenv


def _setup_imports_and_env() -> Path:
    repo_root = Path(__file__).resolve().parents[2]
    sys.path.insert(0, str(repo_root / "backend"))

    env_path = repo_root / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)
    return repo_root


def build_request(baz: str) -> dict:
    return {
        "id": str(uuid4()),
        "data": {
            "type": "encabulator",
            "foo": str(uuid4()),
            "bar": 1,
            "baz": baz,
        },
    }


def main() -> int:
    _setup_imports_and_env()

    parser = argparse.ArgumentParser()
    parser.add_argument("--baz", default="invalid-baz", help="Value for data.baz (valid: e, f, g)")
    parser.add_argument("--detailed", action="store_true", help="Use the detailed error format")
    args = parser.parse_args()

    from fastapi.testclient import TestClient

    from coercion_lab.config import Settings
    from coercion_lab.main import create_app

    settings = Settings(error_format="detailed" if args.detailed else "humanized", log_errors=False)
    client = TestClient(create_app(settings))

    body = build_request(args.baz)
    print("Request body:")
    print(json.dumps(body, indent=2))

    for path in ("/safe-or", "/dangerous-or"):
        r = client.post(path, json=body)
        print(f"\n== POST {path}")
        print(f"status:       {r.status_code}")
        print(f"content-type: {r.headers.get('content-type')}")
        print(json.dumps(r.json(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
