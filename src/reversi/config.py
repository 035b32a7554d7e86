import os
from dotenv import load_dotenv
from typing import Optional

load_dotenv()


def get_ai_delay() -> float:
    """AI thinking delay in seconds."""
    return int(os.getenv("REVERSI_AI_DELAY_MS", "200")) / 1000


def get_verbose() -> bool:
    return os.getenv("REVERSI_VERBOSE", "0") != "0"


def get_seed() -> Optional[int]:
    seed = os.getenv("REVERSI_SEED")
    if seed is None or seed == "":
        return None
    return int(seed)
