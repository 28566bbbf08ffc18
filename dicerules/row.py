from loguru import logger

from dicerules.rulesets.base import evaluate


class RuleRow:
    """A score card row that can be claimed exactly once.

    Shows the rule description until claimed, and the score afterwards.
    """

    def __init__(self, rule):
        self.rule = rule
        self.score = None

    @property
    def claimed(self):
        return self.score is not None

    @property
    def state(self):
        return "disabled" if self.claimed else "active"

    @property
    def display(self):
        if self.claimed:
            return str(self.score)
        return self.rule.description

    def claim(self, hand):
        if self.claimed:
            logger.debug("Row {} already claimed, ignoring", self.rule.name)
            return self.score

        # evaluate before flipping state so an invalid hand leaves the row open
        score = evaluate(self.rule, hand)
        self.score = score
        logger.info("Claimed {} for {} points", self.rule.name, score)
        return score

    def __repr__(self):
        return f"{self.__class__.__name__}(rule={self.rule.name}, score={self.score})"


def rows_for(ruleset):
    return [RuleRow(rule) for rule in ruleset]


def pretty_name(name):
    return name.replace("_", " ").title()


def format_rows(rows):
    pretty_names = [pretty_name(row.rule.name) for row in rows]
    colwidth = max(len(pn) for pn in pretty_names) + 2

    def align(string):
        format_string = f"{{:<{colwidth}}}"
        return format_string.format(string)

    separator_line = "".join(["=" * colwidth, "+", "=" * 5])

    out = ["", separator_line]

    for name, row in zip(pretty_names, rows):
        out.append("".join([align(f" {name}"), "| ", row.display]))

    out.append(separator_line)
    out.append("")

    return "\n".join(out)
