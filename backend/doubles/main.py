import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from doubles.config import LOG_LEVEL, cors_origins
from doubles.routes import match

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

APP_NAME = "Doubles Match Scheduler API"

app = FastAPI(title=APP_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include match scheduling router
app.include_router(match.router, prefix="/api", tags=["match"])


@app.get("/api/health")
def health_check():
    """Diagnostic endpoint to verify the service is up"""
    return {"app_name": APP_NAME, "status": "healthy"}
