"""Combat engine package."""

from arena.engine.character import Character
from arena.engine.combat_log import CombatLog
from arena.engine.match import Match, MatchAlreadyFoughtError
from arena.engine.narrator import describe, narrate
from arena.engine.roster import Archetype, archetype_defaults, create_character
from arena.engine.sorcerer import Sorcerer
from arena.engine.traits import Combatant, Damageable, Defender, Healer, Recoverable
from arena.engine.warrior import Warrior

__all__ = [
    "Archetype",
    "Character",
    "CombatLog",
    "Combatant",
    "Damageable",
    "Defender",
    "Healer",
    "Match",
    "MatchAlreadyFoughtError",
    "Recoverable",
    "Sorcerer",
    "Warrior",
    "archetype_defaults",
    "create_character",
    "describe",
    "narrate",
]
