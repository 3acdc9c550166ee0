"""Central configuration defaults and constants for Arena."""

import os

# Character Rules
HEALTH_CAP = int(os.getenv("ARENA_HEALTH_CAP", "100"))  # Healing never raises health above this
LEVEL_POINTS_STEP = int(os.getenv("ARENA_LEVEL_POINTS_STEP", "10"))  # Point budget added per level tier

# Warrior Defaults
DEFAULT_WARRIOR_HEALTH = int(os.getenv("ARENA_WARRIOR_HEALTH", "100"))
DEFAULT_WARRIOR_ATTACK_POWER = int(os.getenv("ARENA_WARRIOR_ATTACK_POWER", "20"))
DEFAULT_WARRIOR_STAMINA = int(os.getenv("ARENA_WARRIOR_STAMINA", "100"))
DEFAULT_WARRIOR_DEFENSE_POWER = int(os.getenv("ARENA_WARRIOR_DEFENSE_POWER", "10"))

# Sorcerer Defaults
DEFAULT_SORCERER_HEALTH = int(os.getenv("ARENA_SORCERER_HEALTH", "100"))
DEFAULT_SORCERER_ATTACK_POWER = int(os.getenv("ARENA_SORCERER_ATTACK_POWER", "25"))
DEFAULT_SORCERER_MANA = int(os.getenv("ARENA_SORCERER_MANA", "100"))
DEFAULT_SORCERER_HEALING_POWER = int(os.getenv("ARENA_SORCERER_HEALING_POWER", "15"))

# Match Defaults
DEFAULT_MATCH_ROUNDS = int(os.getenv("ARENA_MATCH_ROUNDS", "5"))
MAX_MATCH_ROUNDS = int(os.getenv("ARENA_MAX_MATCH_ROUNDS", "1000"))  # Upper bound accepted by the API
DEFAULT_REGENERATION_ENABLED = os.getenv("ARENA_REGENERATION_ENABLED", "true").lower() in ("true", "1", "yes", "on")
REGENERATION_AMOUNT = int(os.getenv("ARENA_REGENERATION_AMOUNT", "1"))  # Stamina/mana restored before each round after the first

# Combat Log
DEFAULT_COMBAT_LOG_CAPACITY = int(os.getenv("ARENA_COMBAT_LOG_CAPACITY", "1000"))

# Logging and API
DEFAULT_LOG_LEVEL = os.getenv("ARENA_LOG_LEVEL", "INFO").upper()
DEFAULT_LOG_FORMAT = "[%(name)-19s - %(levelname)5s] %(message)s"
DEFAULT_API_PORT = int(os.getenv("ARENA_API_PORT", "5000"))
DEFAULT_API_DEBUG = os.getenv("ARENA_API_DEBUG", "false").lower() in ("true", "1", "yes", "on")
