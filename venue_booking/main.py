import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from venue_booking.api.routes import (
    bookings,
    extras,
    extras_prices,
    hall_prices,
    halls,
    price_sets,
    pricing,
    season_rules,
)
from venue_booking.core.logging_config import setup_logging
from venue_booking.db.init_db import init_db
from venue_booking.pricing.errors import NotFoundError, PricingError, ValidationError

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(
    title="Venue Booking API",
    version="1.0.0",
    description="Halls, price lists, season rules, add-on services, rental quotes and bookings",
    lifespan=lifespan,
)

# CORS (important for frontend)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -------- PRICING ERRORS --------
STATUS_BY_ERROR = {
    ValidationError: 400,
    NotFoundError: 404,
}


@app.exception_handler(PricingError)
async def pricing_error_handler(request: Request, exc: PricingError):
    status_code = STATUS_BY_ERROR.get(type(exc), 400)
    logger.info("%s on %s: %s", exc.code, request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"valid": False, "error": exc.message, "code": exc.code, "details": exc.details},
    )


# -------- ROUTERS REGISTER ORDER MATTERS --------
app.include_router(halls.router)
app.include_router(price_sets.router)
app.include_router(hall_prices.router)
app.include_router(extras.router)
app.include_router(extras_prices.router)
app.include_router(season_rules.router)
app.include_router(pricing.router)
app.include_router(bookings.router)


@app.get("/", tags=["Root"])
def root():
    return {"message": "Backend running successfully"}
