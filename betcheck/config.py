import os
from dotenv import load_dotenv
import yaml
from pathlib import Path

CONFIG_FILE = Path(__file__).parent / "config.yaml"

def load_config():
    if CONFIG_FILE.exists():
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    return {}

CONFIG = load_config()

def get_weight(category: str, name: str, default: float = 0.0):
    """Return weight (or any scalar setting) from YAML or fallback to default."""
    section = CONFIG.get(getattr(category, "value", category), {}) or {}
    return section.get(name, default)


def get_section(category: str) -> dict:
    return CONFIG.get(getattr(category, "value", category), {}) or {}


# ENV variable
load_dotenv()

# Registry feed (local CSV path or http(s) URL)
REGISTRY_SOURCE = os.getenv("REGISTRY_SOURCE", "data/bets.csv")

# General Settings
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "5"))
CACHE_DIR = os.getenv("CACHE_DIR", ".cache")
