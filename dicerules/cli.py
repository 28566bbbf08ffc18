"""
cli.py

Entry point for CLI.
"""

import sys
import itertools

import click
from loguru import logger

from dicerules import __version__
from dicerules.rulesets import AVAILABLE_RULESETS
from dicerules.rulesets.base import InvalidHand, validate_hand, NUM_DICE, NUM_FACES


def _all_rule_names():
    return sorted({name for r in AVAILABLE_RULESETS.values() for name in r.names})


ruleset_option = click.option(
    "--ruleset", type=click.Choice(list(AVAILABLE_RULESETS.keys())), default="yahtzee"
)


def _parse_hand(dice):
    try:
        return validate_hand(dice)
    except InvalidHand as exc:
        raise click.BadParameter(str(exc), param_hint="DICE") from exc


def _get_rule_or_fail(ruleset, name):
    if name not in ruleset:
        raise click.BadParameter(
            f"Rule {name} is not part of ruleset {ruleset.name}", param_hint="--rule"
        )
    return ruleset[name]


@click.group("dicerules", invoke_without_command=True)
@click.version_option(version=__version__)
@click.pass_context
@click.option(
    "-v",
    "--loglevel",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
)
def cli(ctx, loglevel):
    """Score Yahtzee hands, one rule at a time."""

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    logger.remove()
    logger.add(sys.stderr, level=loglevel.upper())


@cli.command("rules")
@ruleset_option
def rules(ruleset):
    """List all scoring rules."""
    from dicerules.row import format_rows, rows_for

    click.echo(format_rows(rows_for(AVAILABLE_RULESETS[ruleset])))


@cli.command("score")
@click.argument("DICE", nargs=-1, type=int)
@click.option("--rule", "rule_name", type=click.Choice(_all_rule_names()))
@ruleset_option
def score(dice, rule_name, ruleset):
    """Score a hand of five dice against one or all rules."""
    from dicerules.row import pretty_name

    hand = _parse_hand(dice)
    ruleset = AVAILABLE_RULESETS[ruleset]

    if rule_name is not None:
        rule = _get_rule_or_fail(ruleset, rule_name)
        click.echo(rule.evaluate(hand))
        return

    for name, value in ruleset.score_all(hand).items():
        click.echo(f" {pretty_name(name):<18}| {value}")


@cli.command("claim")
@click.argument("DICE", nargs=-1, type=int)
@click.option(
    "--rule", "rule_names", type=click.Choice(_all_rule_names()), multiple=True
)
@ruleset_option
def claim(dice, rule_names, ruleset):
    """Claim rules with a hand and show the resulting rows."""
    from dicerules.row import format_rows, rows_for

    hand = _parse_hand(dice)
    ruleset = AVAILABLE_RULESETS[ruleset]

    if not rule_names:
        raise click.UsageError("Give at least one --rule to claim")

    rows = {row.rule.name: row for row in rows_for(ruleset)}
    for name in rule_names:
        _get_rule_or_fail(ruleset, name)
        rows[name].claim(hand)

    click.echo(format_rows(list(rows.values())))


def longest_run(faces):
    """Length of the longest run of consecutive values in ``faces``."""
    best = 0
    current = 0
    for value in range(1, NUM_FACES + 1):
        if value in faces:
            current += 1
            best = max(best, current)
        else:
            current = 0
    return best


@cli.command("check-straights")
@ruleset_option
def check_straights(ruleset):
    """Compare straight rules against a longest-run check for every hand."""
    ruleset = AVAILABLE_RULESETS[ruleset]
    expected_run = {"small_straight": 4, "large_straight": 5}

    mismatches = []
    num_hands = 0
    for hand in itertools.combinations_with_replacement(
        range(1, NUM_FACES + 1), NUM_DICE
    ):
        num_hands += 1
        run = longest_run(set(hand))
        for name, min_run in expected_run.items():
            if name not in ruleset:
                continue

            got = ruleset.score(hand, name) > 0
            want = run >= min_run
            if got != want:
                logger.warning("{} disagrees on {}", name, hand)
                mismatches.append((name, hand, got))

    for name, hand, got in mismatches:
        click.echo(f" {name}: {list(hand)} scored={'yes' if got else 'no'}")

    click.echo(f"Checked {num_hands} hands, found {len(mismatches)} mismatches.")

    if mismatches:
        sys.exit(1)


if __name__ == "__main__":
    cli()
