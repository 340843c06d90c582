import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

# Roster ceiling for the HTTP and CLI boundaries; scheduling cost grows with C(N, 4)^2
MAX_PLAYERS = int(os.getenv("MAX_PLAYERS", "12"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def cors_origins() -> List[str]:
    """Localhost defaults plus any comma-separated CORS_ORIGINS entries."""
    origins = list(_DEFAULT_CORS_ORIGINS)
    extra = os.getenv("CORS_ORIGINS", "")
    if extra:
        origins.extend(o.strip() for o in extra.split(",") if o.strip())
    return origins
