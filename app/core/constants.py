"""Game constants and configuration."""

import os
from pathlib import Path

# Lobby settings
MIN_PLAYERS = 2
MAX_PLAYERS = int(os.environ.get("MAX_PLAYERS", "8"))
LOBBY_CODE_LENGTH = 6

# Round settings
DEFAULT_GAME_DURATION_MS = int(os.environ.get("DEFAULT_GAME_DURATION_MS", str(5 * 60 * 1000)))

# Word list, one word per line
WORDS_FILE = Path(os.environ.get("WORDS_FILE", Path(__file__).parent / "data" / "words.csv"))
FALLBACK_WORD = "DEFAULT"

# Server settings
PORT = int(os.environ.get("PORT", "3001"))
CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
