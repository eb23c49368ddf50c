"""Numbered single-choice menu used by interactive mode."""

import sys
from dataclasses import dataclass, field
from typing import Callable, List, Sequence, TextIO, Tuple

import click


@dataclass
class MenuConfig:
    """I/O configuration for menu display and input."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    output: TextIO = field(default_factory=lambda: sys.stdout)


def _render_options(prompt, labels, default):
    lines = ["", prompt]
    for number, label in enumerate(labels, start=1):
        marker = " [default]" if number == default else ""
        lines.append(f"  {number}) {label}{marker}")
    lines.append("")
    return lines


def _parse_choice(raw_input, option_count, default):
    raw_input = raw_input.strip()
    if raw_input == "" and default:
        return default
    if raw_input.isdigit() and 1 <= int(raw_input) <= option_count:
        return int(raw_input)
    return None


def select_option(prompt: str, options: Sequence[Tuple[str, object]], default: int = 1, *, config=None):
    """Show numbered options and return the value of the one the user picks.

    Args:
        prompt: Question displayed above the options.
        options: (label, value) pairs in display order.
        default: 1-based number chosen on empty input.
        config: MenuConfig with input_fn and output stream.

    Raises:
        SystemExit(0): When input is closed before a choice is made.
    """
    config = config or MenuConfig()
    labels: List[str] = [label for label, _ in options]

    for line in _render_options(prompt, labels, default):
        click.echo(line, file=config.output)

    prompt_text = f"Enter your choice (1-{len(options)}) [default: {default}]: "
    while True:
        try:
            raw = config.input_fn(prompt_text)
        except EOFError:
            click.echo("", file=config.output)
            click.echo("Input closed. Exiting.", file=config.output)
            sys.exit(0)
        number = _parse_choice(raw, len(options), default)
        if number is not None:
            return options[number - 1][1]
        click.echo(f"Invalid choice. Please enter a number between 1 and {len(options)}.", file=config.output)
