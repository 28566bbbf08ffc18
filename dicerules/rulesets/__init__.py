from .base import InvalidHand, evaluate
from .yahtzee import yahtzee_rules

AVAILABLE_RULESETS = {r.name: r for r in (yahtzee_rules,)}
