from enum import Enum


class EvolutionPhase(str, Enum):
    ACTIVE = "active"
    EVOLVING = "evolving"


VALID_TRANSITIONS: dict[EvolutionPhase, set[EvolutionPhase]] = {
    EvolutionPhase.ACTIVE: {EvolutionPhase.EVOLVING},
    EvolutionPhase.EVOLVING: {EvolutionPhase.ACTIVE},
}


def is_valid_transition(current: EvolutionPhase, new: EvolutionPhase) -> bool:
    return new in VALID_TRANSITIONS.get(current, set())


def validate_transition(current: EvolutionPhase, new: EvolutionPhase) -> None:
    if not is_valid_transition(current, new):
        valid_next = VALID_TRANSITIONS.get(current, set())
        raise ValueError(
            f"Invalid phase transition: {current.value} -> {new.value}. "
            f"Valid transitions from {current.value}: {[s.value for s in valid_next]}"
        )
