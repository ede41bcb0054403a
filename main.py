"""
Jyotish Engine — FastAPI Backend
================================
Endpoints:
  POST /api/chart            — Birth chart (Vedic or Western)
  POST /api/panchang         — Daily panchang + this month's festivals
  GET  /api/festivals        — Festival calendar for a year or month
  POST /api/muhurat/active   — Is a muhurat window active right now
  GET  /api/health           — Health check
"""

import logging
from dataclasses import asdict
from datetime import date, datetime
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from jyotish_engine import (
    AstrologySystem, BirthDetails, JyotishError,
    calculate_astrology_chart, calculate_panchang, is_within_muhurat,
)
from jyotish_engine.config import get_settings
from jyotish_engine.core.errors import InvalidTimeFormatError
from jyotish_engine.core.festivals import festivals_in_month, generate_festivals, upcoming_festivals
from jyotish_engine.log import setup_logging

settings = get_settings()
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Panchang and birth-chart engine: Tithi, Nakshatra, Muhurat, Charts, Dasha",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Models ─────────────────────────────────────────────

class ChartRequest(BaseModel):
    date:      str   = Field(..., description="Birth date YYYY-MM-DD")
    time:      str   = Field(..., description="Local birth time HH:MM")
    latitude:  float = Field(..., ge=-90,  le=90)
    longitude: float = Field(..., ge=-180, le=180)
    timezone:  str   = ""
    system:    AstrologySystem = AstrologySystem.VEDIC
    now:       Optional[datetime] = Field(None,
                   description="Reference moment for transits and periods")


class PanchangRequest(BaseModel):
    date: date
    time: Optional[str] = Field(None, description="IST clock time HH:MM; default midnight")


class MuhuratCheckRequest(BaseModel):
    start: str = Field(..., description="Window start HH:MM")
    end:   str = Field(..., description="Window end HH:MM")
    now:   Optional[datetime] = None


# ── Utilities ──────────────────────────────────────────────────

def _bad_request(exc: JyotishError) -> HTTPException:
    logger.warning("Request rejected: %s", exc)
    return HTTPException(status_code=400, detail=str(exc))


def _panchang_moment(data: PanchangRequest) -> datetime:
    moment = datetime(data.date.year, data.date.month, data.date.day)
    if data.time:
        try:
            clock = datetime.strptime(data.time.strip(), "%H:%M").time()
        except ValueError:
            raise InvalidTimeFormatError(f"Expected HH:MM, got {data.time!r}") from None
        moment = datetime.combine(data.date, clock)
    return moment


# ── Endpoints ──────────────────────────────────────────────────

@app.get("/api/health")
def health():
    return {
        "status": "ok",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "endpoints": [
            "POST /api/chart",
            "POST /api/panchang",
            "GET /api/festivals",
            "POST /api/muhurat/active",
        ],
    }


@app.post("/api/chart")
def chart_endpoint(data: ChartRequest):
    try:
        birth = BirthDetails.parse(data.date, data.time, data.latitude,
                                   data.longitude, data.timezone)
        chart = calculate_astrology_chart(birth, data.system, now=data.now)
        return {"success": True, "chart": asdict(chart)}
    except JyotishError as e:
        raise _bad_request(e)


@app.post("/api/panchang")
def panchang_endpoint(data: PanchangRequest):
    try:
        moment = _panchang_moment(data)
        panchang = calculate_panchang(moment)
        return {
            "success": True,
            "panchang": asdict(panchang),
            "festivals": [asdict(f) for f in upcoming_festivals(moment)],
        }
    except JyotishError as e:
        raise _bad_request(e)


@app.get("/api/festivals")
def festivals_endpoint(
    year: Optional[int] = Query(None, ge=1, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
):
    year = year or date.today().year
    festivals = festivals_in_month(year, month) if month else generate_festivals(year)
    return {"success": True, "year": year, "festivals": [asdict(f) for f in festivals]}


@app.post("/api/muhurat/active")
def muhurat_active_endpoint(data: MuhuratCheckRequest):
    try:
        active = is_within_muhurat(data.start, data.end, data.now)
        return {"success": True, "active": active}
    except JyotishError as e:
        raise _bad_request(e)
