"""Serves the pre-built dashboard bundle with single-page-app fallback.

Must be included after every API router: it matches any GET path.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse

router = APIRouter(include_in_schema=False)


def _resolve(static_dir: Path, path: str) -> Path | None:
    """Return the file under *static_dir* for *path*, if one exists."""
    if not path:
        return None
    candidate = (static_dir / path).resolve()
    if not candidate.is_relative_to(static_dir) or not candidate.is_file():
        return None
    return candidate


@router.get("/{full_path:path}")
async def serve_frontend(full_path: str, request: Request) -> FileResponse:
    if full_path == "api" or full_path.startswith("api/"):
        raise HTTPException(status_code=404, detail="Not Found")

    static_dir = Path(request.app.state.settings.static_dir).resolve()
    asset = _resolve(static_dir, full_path)
    if asset is not None:
        return FileResponse(asset)

    index = static_dir / "index.html"
    if not index.is_file():
        raise HTTPException(status_code=404, detail="Dashboard bundle not built")
    return FileResponse(index)
