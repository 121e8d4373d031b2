"""Context entry parsing: ``<project>[.<build-type>][+<target-type>]``.

The build type and target type may appear in either order, so
``App.Debug+Board`` and ``App+Board.Debug`` name the same context.
"""

from dataclasses import dataclass

from constants import GRAMMAR, Grammar


@dataclass(frozen=True)
class ContextName:
    """Project, build type and target type of a context entry."""
    project: str = ""
    build_type: str = ""
    target_type: str = ""

    def __str__(self) -> str:
        text = self.project
        if self.build_type:
            text += GRAMMAR.build_type_separator + self.build_type
        if self.target_type:
            text += GRAMMAR.target_type_separator + self.target_type
        return text


def _after(entry: str, separator: str, terminator: str) -> str:
    """Text following the first ``separator`` up to the next ``terminator``."""
    _, found, tail = entry.partition(separator)
    if not found:
        return ""
    return tail.partition(terminator)[0]


def parse_context_entry(entry: str, grammar: Grammar = GRAMMAR) -> ContextName:
    """Parse a context entry; missing parts come back as empty strings."""
    build_sep = grammar.build_type_separator
    target_sep = grammar.target_type_separator

    cut = len(entry)
    for separator in (build_sep, target_sep):
        pos = entry.find(separator)
        if pos != -1:
            cut = min(cut, pos)

    return ContextName(
        project=entry[:cut],
        build_type=_after(entry, build_sep, target_sep),
        target_type=_after(entry, target_sep, build_sep),
    )
