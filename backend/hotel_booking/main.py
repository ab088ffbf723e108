# hotel_booking/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hotel_booking.config import settings
from hotel_booking.core.db import init_db, close_db
from hotel_booking.core.bootstrap import log_database_version, warn_on_default_secret
from hotel_booking.api.errors import register_exception_handlers
from hotel_booking.api.routers import auth, bookings, hotels, users

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.on_event("startup")
async def on_startup():
    # Open the bounded connection pool once; handlers borrow from it per request
    warn_on_default_secret()
    await init_db(generate_schemas=settings.db_generate_schemas)
    await log_database_version()
    logger.info("[startup] %s ready (env=%s)", settings.APP_NAME, settings.env)


@app.on_event("shutdown")
async def on_shutdown():
    await close_db()
    logger.info("[shutdown] connection pool drained")


# REST
app.include_router(auth.router)
app.include_router(bookings.router)
app.include_router(hotels.router)
app.include_router(users.router)


@app.get("/healthz")
def healthz():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("hotel_booking.main:app", host=settings.host, port=settings.port)
