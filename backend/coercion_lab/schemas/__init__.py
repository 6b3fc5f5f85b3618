"""
Schemas used by the FastAPI layer.

- `common`: pydantic models for response bodies with a fixed shape
- `machines`: the request-body schemas the two routes validate against

Keep them here (not in `main.py`) so scripts and tests can reuse them.
"""
