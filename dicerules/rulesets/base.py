from collections import namedtuple, OrderedDict

import numpy as np
from loguru import logger


NUM_DICE = 5
NUM_FACES = 6


class InvalidHand(ValueError):
    """Raised when a hand is not exactly five dice with values 1-6."""


def validate_hand(hand):
    """Check the shape of a hand and return it as a tuple of ints."""
    try:
        hand = tuple(hand)
    except TypeError:
        raise InvalidHand(f"Hand must be a sequence of dice, got {hand!r}") from None

    if not hand:
        raise InvalidHand("Hand is empty")

    if len(hand) != NUM_DICE:
        raise InvalidHand(f"Hand must have {NUM_DICE} dice, got {len(hand)}")

    for die in hand:
        # bool is an int subclass, but True is not a die
        if isinstance(die, (bool, np.bool_)) or not isinstance(
            die, (int, np.integer)
        ):
            raise InvalidHand(f"Die values must be integers, got {die!r}")

        if not 1 <= die <= NUM_FACES:
            raise InvalidHand(f"Die values must be between 1 and {NUM_FACES}, got {die}")

    return tuple(int(die) for die in hand)


def dice_sum(hand):
    if len(hand) == 0:
        raise InvalidHand("Cannot sum an empty hand")
    return int(sum(hand))


def _face_counts(hand):
    return np.bincount(hand, minlength=NUM_FACES + 1)[1:]


def frequency_profile(hand):
    """Counts of each distinct face in the hand, ordered by face.

    Faces that do not appear are left out, so five equal dice give ``(5,)``.
    """
    counts = _face_counts(hand)
    return tuple(int(c) for c in counts[counts > 0])


def count_of(hand, val):
    return sum(1 for die in hand if die == val)


class _Rule:
    __slots__ = ()

    @property
    def kind(self):
        return self.__class__.__name__

    def evaluate(self, hand):
        return evaluate(self, hand)


class TotalOneNumber(
    _Rule, namedtuple("total_one_number", ["name", "description", "val"])
):
    """Sum of the dice showing ``val``."""

    __slots__ = ()


class SumDistro(_Rule, namedtuple("sum_distro", ["name", "description", "count"])):
    """Sum of all dice if some face shows up at least ``count`` times."""

    __slots__ = ()


class FullHouse(_Rule, namedtuple("full_house", ["name", "description", "score"])):
    __slots__ = ()


class SmallStraight(
    _Rule, namedtuple("small_straight", ["name", "description", "score"])
):
    __slots__ = ()


class LargeStraight(
    _Rule, namedtuple("large_straight", ["name", "description", "score"])
):
    __slots__ = ()


class Yahtzee(_Rule, namedtuple("yahtzee", ["name", "description", "score"])):
    __slots__ = ()


def _score_total_one_number(rule, hand):
    return rule.val * count_of(hand, rule.val)


def _score_sum_distro(rule, hand):
    if max(frequency_profile(hand)) >= rule.count:
        return dice_sum(hand)

    return 0


def _score_full_house(rule, hand):
    profile = frequency_profile(hand)
    if 3 in profile and 2 in profile:
        return rule.score

    return 0


def _score_small_straight(rule, hand):
    faces = set(hand)

    # four faces: the two missing ones must sit at the edges of 1-6
    if len(faces) == 4 and (
        (1 not in faces and 2 not in faces)
        or (1 not in faces and 6 not in faces)
        or (5 not in faces and 6 not in faces)
    ):
        return rule.score

    # five faces: a run of four survives unless the gap is at 3 or 4
    if len(faces) == 5 and (
        1 not in faces or 6 not in faces or 2 not in faces or 5 not in faces
    ):
        return rule.score

    return 0


def _score_large_straight(rule, hand):
    faces = set(hand)
    if len(faces) == 5 and (1 not in faces or 6 not in faces):
        return rule.score

    return 0


def _score_yahtzee(rule, hand):
    if frequency_profile(hand)[0] == 5:
        return rule.score

    return 0


_SCORERS = {
    TotalOneNumber: _score_total_one_number,
    SumDistro: _score_sum_distro,
    FullHouse: _score_full_house,
    SmallStraight: _score_small_straight,
    LargeStraight: _score_large_straight,
    Yahtzee: _score_yahtzee,
}


def evaluate(rule, hand):
    """Score ``hand`` under ``rule``.

    The hand is validated first; a malformed hand raises :class:`InvalidHand`
    instead of scoring 0.
    """
    hand = validate_hand(hand)

    try:
        scorer = _SCORERS[type(rule)]
    except KeyError:
        raise TypeError(f"Unknown rule type: {type(rule).__name__}") from None

    score = int(scorer(rule, hand))
    logger.debug("Scored {} with {}: {}", hand, rule.name, score)
    return score


class Ruleset:
    """Represents the rules of the game.

    Used to look up rules by name and to convert hands to scores.
    """

    def __init__(self, rules, ruleset_name="custom"):
        self.name = ruleset_name
        self.num_dice = NUM_DICE
        self._rules = OrderedDict((rule.name, rule) for rule in rules)

        if len(self._rules) != len(rules):
            raise ValueError("Rule names must be unique")

    @property
    def names(self):
        return tuple(self._rules)

    @property
    def rules(self):
        return tuple(self._rules.values())

    def __getitem__(self, name):
        return self._rules[name]

    def __contains__(self, name):
        return name in self._rules

    def __iter__(self):
        return iter(self._rules.values())

    def __len__(self):
        return len(self._rules)

    def score(self, hand, name):
        return evaluate(self[name], hand)

    def score_all(self, hand):
        hand = validate_hand(hand)
        return OrderedDict((rule.name, evaluate(rule, hand)) for rule in self)

    def __repr__(self):
        return f"{self.__class__.__name__}(ruleset_name={self.name})"
