"""
FastAPI front end for the scanner. Same pipeline as the CLI; bad port
specs and unresolvable targets map to 400.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from core.models import ScanReport
from pipeline.orchestrator import run_scan

log = logging.getLogger(__name__)

app = FastAPI(title="clapscan API", version="0.1")


class ScanPayload(BaseModel):
    target: str
    ports: Optional[str] = None
    concurrency: Optional[int] = Field(None, ge=1)
    timeout_ms: Optional[int] = Field(None, ge=1)


@app.post("/api/scan", response_model=ScanReport)
async def api_scan(payload: ScanPayload):
    try:
        return await run_scan(
            payload.target,
            ports_spec=payload.ports,
            concurrency=payload.concurrency,
            timeout_ms=payload.timeout_ms,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:  # noqa: BLE001
        log.exception("scan failed")
        raise HTTPException(status_code=500, detail="scan failed") from exc


@app.get("/api/health")
def api_health():
    return {"status": "ok"}
