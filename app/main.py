"""Insider game server."""
import logging

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.constants import CORS_ORIGINS, LOG_LEVEL, PORT
from core.errors import GameError
from core.game_manager import GameManager, get_game_manager
from routes import games, lobbies

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Insider",
    description="Backend for the Insider word-guessing party game",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in CORS_ORIGINS.split(",")],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(lobbies.router)
app.include_router(games.router)


@app.exception_handler(GameError)
async def game_error_handler(request: Request, exc: GameError):
    """Render game errors as ``{"error": message}``."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as invalid input."""
    errors = exc.errors()
    if errors:
        location = ".".join(str(part) for part in errors[0]["loc"] if part != "body")
        message = f"{location}: {errors[0]['msg']}" if location else errors[0]["msg"]
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


@app.get("/health")
async def health_check(manager: GameManager = Depends(get_game_manager)):
    """Health check endpoint."""
    return {"status": "healthy", **manager.get_stats()}


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=PORT, log_level=LOG_LEVEL.lower())
