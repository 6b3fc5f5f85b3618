"""
Run the API locally with uvicorn.

Run (from repo root):
  python scripts/server/run_server.py
  API_PORT=8010 python scripts/server/run_server.py
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> int:
    repo_root = Path(__file__).resolve().parents[2]
    sys.path.insert(0, str(repo_root / "backend"))

    import uvicorn

    from coercion_lab.config import load_env_file, load_settings

    load_env_file()
    settings = load_settings()
    print(f"[STARTUP] Serving on http://{settings.api_host}:{settings.api_port} (errors={settings.error_format})")
    uvicorn.run("coercion_lab.main:app", host=settings.api_host, port=settings.api_port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
