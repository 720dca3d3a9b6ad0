"""
Hiring pipeline stages and the transition table between them.

A candidate starts in APPLIED and moves forward one stage at a time. It can be
REJECTED from any non-terminal stage. HIRED is only ever set by the hire
transaction (see ``HiringService.hire_candidate``).
"""
from types import MappingProxyType

APPLIED = "APPLIED"
SCREENING = "SCREENING"
INTERVIEW = "INTERVIEW"
OFFER = "OFFER"
HIRED = "HIRED"
REJECTED = "REJECTED"

VALID_STAGES = (APPLIED, SCREENING, INTERVIEW, OFFER, HIRED, REJECTED)
INITIAL_STAGE = APPLIED
TERMINAL_STAGES = frozenset({HIRED, REJECTED})

ALLOWED_TRANSITIONS = MappingProxyType({
    APPLIED: frozenset({SCREENING, REJECTED}),
    SCREENING: frozenset({INTERVIEW, REJECTED}),
    INTERVIEW: frozenset({OFFER, REJECTED}),
    OFFER: frozenset({HIRED, REJECTED}),
    HIRED: frozenset(),
    REJECTED: frozenset(),
})


def is_valid_stage(stage) -> bool:
    return stage in VALID_STAGES


def allowed_next_stages(current_stage) -> frozenset:
    return ALLOWED_TRANSITIONS.get(current_stage, frozenset())


def can_transition(current_stage, next_stage) -> bool:
    """True when ``next_stage`` is listed for ``current_stage``. No self-loops."""
    return next_stage in allowed_next_stages(current_stage)
