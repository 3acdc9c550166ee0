"""Console demo: Leon the warrior against Merlin the sorcerer."""

import logging

from arena.config import DEFAULT_LOG_FORMAT, DEFAULT_LOG_LEVEL, DEFAULT_MATCH_ROUNDS
from arena.engine.match import Match
from arena.engine.narrator import describe
from arena.engine.sorcerer import Sorcerer
from arena.engine.warrior import Warrior
from arena.models.levels import CharacterLevel


def main() -> None:
    logging.basicConfig(level=DEFAULT_LOG_LEVEL, format=DEFAULT_LOG_FORMAT)

    warrior = Warrior(level=CharacterLevel.LEVEL_2, name="Leon", health=5, attack_power=3, stamina=2)
    sorcerer = Sorcerer(level=CharacterLevel.LEVEL_2, name="Merlin", health=4, attack_power=4, mana=2)

    match = Match(
        rounds=DEFAULT_MATCH_ROUNDS,
        challenger=warrior,
        opponent=sorcerer,
        on_event=lambda e: print(describe(e), flush=True),
    )
    match.fight()


if __name__ == "__main__":
    main()
