from dotenv import load_dotenv
import os

load_dotenv()

class Config:
    LOG_DIR = os.getenv("LOG_DIR", "./logs")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # events tracker
    WINDOW_SECONDS = int(os.getenv("EVTRACK_WINDOW_SECONDS", 300))
    TICK_INTERVAL_MS = int(os.getenv("EVTRACK_TICK_INTERVAL_MS", 1000))
