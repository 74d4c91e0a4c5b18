from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import Optional, Tuple

import numpy as np
from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from .simulation import simulate_transit
import logging

log = logging.getLogger(__name__)


app = FastAPI(title="Kinetic Graphic API", version="1.0.0")

MAX_FRAMES = 100_000


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    # Echoed inputs may be NaN/Infinity, which strict JSON rendering rejects
    errors = [{k: v for k, v in err.items() if k != "input"} for err in exc.errors()]
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})


class SimulateRequest(BaseModel):
    # NaN/Infinity literals parse as JSON but cannot be serialized back
    model_config = ConfigDict(allow_inf_nan=False)

    start: Tuple[float, float]
    target: Tuple[float, float]
    frame_ms: float = Field(16.0, gt=0)
    max_frames: int = Field(10000, gt=0, le=MAX_FRAMES)

    # Motion knobs; None keeps the engine default
    min_speed: Optional[float] = None
    max_speed: Optional[float] = None
    acceleration: Optional[float] = None
    slow_down_radius: Optional[float] = None


@app.get("/api/ping")
async def ping():
    return {"ok": True, "time": datetime.now(timezone.utc).isoformat()}


@app.post("/api/simulate")
async def simulate(req: SimulateRequest):
    try:
        preset = req.model_dump(
            exclude={'start', 'target', 'frame_ms', 'max_frames'},
            exclude_none=True,
        )
        path, speeds, frames, params = simulate_transit(
            req.start,
            req.target,
            frame_ms=req.frame_ms,
            max_frames=req.max_frames,
            preset=preset,
        )
        return {
            "path": path.tolist(),
            "speeds": speeds,
            "frames": frames,
            # Arrival snaps exactly onto the target
            "arrived": bool(np.array_equal(path[-1], np.asarray(req.target, dtype=np.float64))),
            "params": params,
        }
    except Exception as e:
        log.exception("Simulation failed")
        raise HTTPException(status_code=500, detail=str(e))


def main():
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=int(os.getenv("PORT", 8002)))

if __name__ == "__main__":
    main()
