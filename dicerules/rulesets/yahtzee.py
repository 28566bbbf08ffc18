"""
Scoring rules for a single Yahtzee score card.

Upper section scores the matching dice, the lower section scores patterns.
"""

from .base import (
    TotalOneNumber,
    SumDistro,
    FullHouse,
    SmallStraight,
    LargeStraight,
    Yahtzee,
    Ruleset,
)


ones = TotalOneNumber("ones", "1 point for each one", val=1)
twos = TotalOneNumber("twos", "2 points for each two", val=2)
threes = TotalOneNumber("threes", "3 points for each three", val=3)
fours = TotalOneNumber("fours", "4 points for each four", val=4)
fives = TotalOneNumber("fives", "5 points for each five", val=5)
sixes = TotalOneNumber("sixes", "6 points for each six", val=6)

three_of_a_kind = SumDistro(
    "three_of_a_kind", "Sum of dice if 3 are the same", count=3
)
four_of_a_kind = SumDistro("four_of_a_kind", "Sum of dice if 4 are the same", count=4)

full_house = FullHouse(
    "full_house", "If 3 of one value and 2 of another, score 25", score=25
)

small_straight = SmallStraight(
    "small_straight", "If 4+ values in a row, score 30", score=30
)
large_straight = LargeStraight(
    "large_straight", "If 5 values in a row, score 40", score=40
)

yahtzee = Yahtzee("yahtzee", "If all values match, score 50", score=50)

# chance is a sum of all dice that needs at least 0 of a kind
chance = SumDistro("chance", "Score sum of all dice", count=0)


yahtzee_rules = Ruleset(
    ruleset_name="yahtzee",
    rules=(
        ones,
        twos,
        threes,
        fours,
        fives,
        sixes,
        three_of_a_kind,
        four_of_a_kind,
        full_house,
        small_straight,
        large_straight,
        yahtzee,
        chance,
    ),
)
