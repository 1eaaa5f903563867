"""Snippet template compilation.

A template is a spec command line with editor placeholders::

    mv ${1%MOT} ${2:pos} # absolute-position motor move

`${n%MOT}` and `${n%CNT}` are typed placeholders that expand to a choice
list of the currently configured motor or counter mnemonics. `${n:label}`
and `${n|a,b|}` are ordinary editor placeholders and pass through to the
insertable body unchanged.
"""

import logging
import re
from typing import Iterable, List, Sequence

from spec_command.models.reference import ReferenceItem, ReferenceMap
from spec_command.registry.exceptions import MalformedConfigEntry
from spec_command.registry.parsing import ParsedTemplate, parse_snippet_template

logger = logging.getLogger(__name__)


SNIPPET_TEMPLATES: List[str] = [
    "mv ${1%MOT} ${2:pos} # absolute-position motor move",
    "mvr ${1%MOT} ${2:pos} # relative-position motor move",
    "umv ${1%MOT} ${2:pos} # absolute-position motor move (live update)",
    "umvr ${1%MOT} ${2:pos} # relative-position motor move (live update)",
    "ascan ${1%MOT} ${2:begin} ${3:end} ${4:steps} ${5:sec} # single-motor absolute-position scan",
    "dscan ${1%MOT} ${2:begin} ${3:end} ${4:steps} ${5:sec} # single-motor relative-position scan",
    "a2scan ${1%MOT} ${2:begin1} ${3:end1} ${4%MOT} ${5:begin2} ${6:end2} ${7:steps} ${8:sec} # two-motor absolute-position scan",
    "d2scan ${1%MOT} ${2:begin1} ${3:end1} ${4%MOT} ${5:begin2} ${6:end2} ${7:steps} ${8:sec} # two-motor relative-position scan",
    "mesh ${1%MOT} ${2:begin1} ${3:end1} ${4:step1} ${5%MOT} ${6:begin2} ${7:end2} ${8:steps2} ${9:sec} # nested two-motor scan that scanned over a grid of points",
    "a3scan ${1%MOT} ${2:begin1} ${3:end1} ${4%MOT} ${5:begin2} ${6:end2} ${7%MOT} ${8:begin3} ${9:end3} ${10:steps} ${11:sec} # three-motor absolute-position scan",
    "d3scan ${1%MOT} ${2:begin1} ${3:end1} ${4%MOT} ${5:begin2} ${6:end2} ${7%MOT} ${8:begin3} ${9:end3} ${10:steps} ${11:sec} # three-motor relative-position scan",
    "a4scan ${1%MOT} ${2:begin1} ${3:end1} ${4%MOT} ${5:begin2} ${6:end2} ${7%MOT} ${8:begin3} ${9:end3} ${10%MOT} ${11:begin4} ${12:end4} ${13:steps} ${14:sec} # four-motor absolute-position scan",
    "d4scan ${1%MOT} ${2:begin1} ${3:end1} ${4%MOT} ${5:begin2} ${6:end2} ${7%MOT} ${8:begin3} ${9:end3} ${10%MOT} ${11:begin4} ${12:end4} ${13:steps} ${14:sec} # four-motor relative-position scan",
    "plotselect ${1%CNT} # select the counter to plot",
]

MOTOR_PATTERN = re.compile(r"%MOT")
COUNTER_PATTERN = re.compile(r"%CNT")
LABELED_PATTERN = re.compile(r"\$\{\d+:([^{}]+)\}")
CHOICE_PATTERN = re.compile(r"\$\{\d+\|[^|]+\|\}")


def _choice_string(names: Sequence[str], fallback: str) -> str:
    """Body of a typed placeholder: '|a,b|' or ':fallback' when empty."""
    if names:
        return "|" + ",".join(names) + "|"
    return ":" + fallback


def render_signature(body: str) -> str:
    """Collapse placeholders into a short one-line form for hover text.

    'mv ${1%MOT} ${2:pos}' -> 'mv motor pos'
    """
    signature = MOTOR_PATTERN.sub(":motor", body)
    signature = COUNTER_PATTERN.sub(":counter", signature)
    signature = LABELED_PATTERN.sub(r"\1", signature)
    return CHOICE_PATTERN.sub("choice", signature)


def render_snippet(body: str, motors: Sequence[str], counters: Sequence[str]) -> str:
    """Expand typed placeholders into editor choice placeholders.

    'mv ${1%MOT} ${2:pos}' -> 'mv ${1|th,tth|} ${2:pos}' with motors
    ['th', 'tth'], or 'mv ${1:motor} ${2:pos}' with no motors.
    """
    motor_choices = _choice_string(motors, "motor")
    counter_choices = _choice_string(counters, "counter")
    snippet = MOTOR_PATTERN.sub(lambda _: motor_choices, body)
    return COUNTER_PATTERN.sub(lambda _: counter_choices, snippet)


def compile_template(
    template: ParsedTemplate, motors: Sequence[str], counters: Sequence[str]
) -> ReferenceItem:
    """Build the snippet reference item for one parsed template."""
    return ReferenceItem(
        signature=render_signature(template.body),
        description=template.comment,
        snippet=render_snippet(template.body, motors, counters),
    )


def compile_snippets(
    templates: Iterable[str],
    motors: Sequence[str],
    counters: Sequence[str],
    target: ReferenceMap,
) -> int:
    """Rebuild `target` from snippet templates.

    The map is cleared and repopulated. Templates sharing a leading word
    overwrite each other in order, so user templates appended after the
    built-ins shadow them.

    Args:
        templates: Template strings, built-ins first
        motors: Motor mnemonic names in configuration order
        counters: Counter mnemonic names in configuration order
        target: Snippet-kind map of the snippet partition

    Returns:
        Number of snippets installed
    """
    target.clear()

    for text in templates:
        result = parse_snippet_template(text)
        if not isinstance(result, ParsedTemplate):
            logger.warning(f"{MalformedConfigEntry(result.text, 'snippet')}")
            continue
        target[result.key] = compile_template(result, motors, counters)

    return len(target)
