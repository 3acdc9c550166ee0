"""Console rendering of combat events."""

from arena.models.events import CombatEvent, EventType, SkipReason

_SKIPPED_ATTACK = {
    SkipReason.DEFEATED: "☠️ Is dead and cannot attack!",
    SkipReason.EXHAUSTED: "💨 Too tired to attack! 💤",
    SkipReason.OUT_OF_MANA: "💨 Out of mana and cannot attack!",
}

_SKIPPED_HEAL = {
    SkipReason.OUT_OF_MANA: "💨 Out of mana and cannot heal!",
    SkipReason.FULL_HEALTH: "💚 Already at full health!",
}


def describe(event: CombatEvent) -> str:
    """Render one event as a narration line."""
    prefix = f"[{event.actor}]:"
    resources = event.resources

    if event.event_type == EventType.ROUND_STARTED:
        return f"\n===== ROUND {event.amount} ====="
    if event.event_type == EventType.MATCH_ENDED:
        if event.target is None:
            return f"No clear winner after {event.amount} rounds!"
        return f"Winner: {event.target}"
    if event.event_type == EventType.ATTACK:
        return f"{prefix} ⚔️ Attacks {event.target or 'target'} with {event.amount} power!"
    if event.event_type == EventType.ATTACK_SKIPPED:
        return f"{prefix} {_SKIPPED_ATTACK.get(event.reason, 'Cannot attack!')}"
    if event.event_type == EventType.DAMAGE_TAKEN:
        return f"{prefix} 💢 Takes {event.amount} damage! ❤️ HP: {resources.get('health')}"
    if event.event_type == EventType.DEFEATED:
        return f"{prefix} 💀 Has been defeated! ⚰️"
    if event.event_type == EventType.DEFENDED:
        return f"{prefix} 🛡️ Blocks some damage! Incoming reduced to {event.amount} (Stamina: {resources.get('stamina')})"
    if event.event_type == EventType.DEFENSE_FAILED:
        return f"{prefix} 💨 Too exhausted to defend!"
    if event.event_type == EventType.HEALED:
        return f"{prefix} 💖✨ Heals self (+{event.amount} HP). HP now: {resources.get('health')}"
    if event.event_type == EventType.HEAL_SKIPPED:
        return f"{prefix} {_SKIPPED_HEAL.get(event.reason, 'Cannot heal!')}"
    if event.event_type == EventType.REGENERATED:
        resource = "Stamina" if "stamina" in resources else "Mana"
        return f"{prefix} (+{event.amount} {resource} before round) {resource} now: {resources.get(resource.lower())}"
    return f"{prefix} {event.event_type.value}"


def narrate(events: list[CombatEvent]) -> list[str]:
    """Render a sequence of events."""
    return [describe(e) for e in events]
