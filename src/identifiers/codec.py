"""Construct and decompose component, condition and pack identifiers.

Identifiers are built from ordered ``(prefix, value)`` pairs where empty values
are skipped together with their prefix, e.g.::

    ARM::CMSIS:CORE@5.6.0
    Keil::Device&Bundle:Startup:Sub&Variant@1.0.0
    ARM::CMSIS@5.9.0
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence, Tuple

from constants import GRAMMAR, Grammar
from common.logging_utils import extra_context, is_debug_enabled

from .models import ComponentAttributes, VariantOwner

logger = logging.getLogger(__name__)

IdElements = Sequence[Tuple[str, Optional[str]]]


def construct_id(elements: IdElements) -> str:
    """Concatenate ``prefix + value`` for every element with a non-empty value."""
    return "".join(prefix + value for prefix, value in elements if value)


def _attr(item: Any, name: str) -> str:
    return getattr(item, name, "") or ""


def _vendor(item: Any, suffix: str) -> str:
    vendor = _attr(item, "vendor")
    return vendor + suffix if vendor else ""


def get_component_id(component: Any, grammar: Grammar = GRAMMAR) -> str:
    """Return the fully specified component id, or "" for a missing component."""
    if component is None:
        return ""
    return construct_id((
        ("", _vendor(component, grammar.suffix_cvendor)),
        ("", _attr(component, "cclass")),
        (grammar.prefix_cbundle, _attr(component, "bundle")),
        (grammar.prefix_cgroup, _attr(component, "group")),
        (grammar.prefix_csub, _attr(component, "sub")),
        (grammar.prefix_cvariant, _attr(component, "variant")),
        (grammar.prefix_cversion, _attr(component, "version")),
    ))


def get_condition_id(condition: Any, grammar: Grammar = GRAMMAR) -> str:
    """Return ``<tag> <component id>`` for a condition expression item."""
    if condition is None:
        return ""
    return f"{_attr(condition, 'tag')} {get_component_id(condition, grammar)}"


def get_component_aggregate_id(component: Any, grammar: Grammar = GRAMMAR) -> str:
    """Return the component id without variant and version."""
    if component is None:
        return ""
    return construct_id((
        ("", _vendor(component, grammar.suffix_cvendor)),
        ("", _attr(component, "cclass")),
        (grammar.prefix_cbundle, _attr(component, "bundle")),
        (grammar.prefix_cgroup, _attr(component, "group")),
        (grammar.prefix_csub, _attr(component, "sub")),
    ))


def get_partial_component_id(component: Any, grammar: Grammar = GRAMMAR) -> str:
    """Return the component id without vendor and version."""
    if component is None:
        return ""
    return construct_id((
        ("", _attr(component, "cclass")),
        (grammar.prefix_cbundle, _attr(component, "bundle")),
        (grammar.prefix_cgroup, _attr(component, "group")),
        (grammar.prefix_csub, _attr(component, "sub")),
        (grammar.prefix_cvariant, _attr(component, "variant")),
    ))


def format_package_id(vendor: str, name: str, version: str, grammar: Grammar = GRAMMAR) -> str:
    """Return ``vendor::name@version`` skipping whichever parts are empty."""
    return construct_id((
        ("", vendor + grammar.suffix_pack_vendor if vendor else ""),
        ("", name),
        (grammar.prefix_pack_version, version),
    ))


def get_package_id(pack: Any, grammar: Grammar = GRAMMAR) -> str:
    """Return the fully specified pack id, or "" for a missing pack."""
    if pack is None:
        return ""
    return format_package_id(_attr(pack, "vendor"), _attr(pack, "name"), _attr(pack, "version"), grammar)


def _split_suffix(segment: str, delimiter: str) -> Tuple[str, Optional[str]]:
    head, found, tail = segment.partition(delimiter)
    return head, (tail if found else None)


def _non_empty(value: Optional[str]) -> Optional[str]:
    return value if value else None


def decompose_component_id(component_id: str, grammar: Grammar = GRAMMAR) -> ComponentAttributes:
    """Split a component id into its attributes.

    Parsing is positional: ``class[&bundle]:group[&variant]:sub[&variant]``.
    When both the group and the sub segment carry a variant, the sub variant
    wins and ``ambiguous_variant`` is set on the result.

    Attributes that come out empty are reported as ``None`` (absent from
    ``as_dict()``) even when their segment or delimiter is present, so
    ``"X:"`` yields no Cgroup and ``"X@"`` yields no Cversion.
    """
    cvendor = None
    remainder = component_id
    if grammar.suffix_cvendor in remainder:
        cvendor, _, remainder = remainder.partition(grammar.suffix_cvendor)

    cversion = None
    if grammar.prefix_cversion in remainder:
        remainder, _, cversion = remainder.partition(grammar.prefix_cversion)

    fields: Dict[str, Optional[str]] = {}
    owner = VariantOwner.NONE
    ambiguous = False
    segments = remainder.split(grammar.segment_separator)
    for index, segment in enumerate(segments[:3]):
        if index == 0:
            fields["cclass"], fields["cbundle"] = _split_suffix(segment, grammar.prefix_cbundle)
            continue
        key = "cgroup" if index == 1 else "csub"
        fields[key], variant = _split_suffix(segment, grammar.prefix_cvariant)
        if not variant:
            continue
        if owner is VariantOwner.GROUP:
            ambiguous = True
            logger.warning(
                "Component id '%s' carries a variant on both Cgroup and Csub; using Csub variant '%s'",
                component_id,
                variant,
            )
        fields["cvariant"] = variant
        owner = VariantOwner.GROUP if index == 1 else VariantOwner.SUB

    if len(segments) > 3 and is_debug_enabled(logger):
        logger.debug(
            "Ignoring extra id segments",
            extra=extra_context(
                event="decision",
                component="identifier_codec",
                action="decompose",
                outcome="segments_ignored",
                count=len(segments) - 3,
            ),
        )

    return ComponentAttributes(
        cvendor=_non_empty(cvendor),
        cclass=_non_empty(fields.get("cclass")),
        cbundle=_non_empty(fields.get("cbundle")),
        cgroup=_non_empty(fields.get("cgroup")),
        csub=_non_empty(fields.get("csub")),
        cvariant=_non_empty(fields.get("cvariant")),
        cversion=_non_empty(cversion),
        variant_owner=owner,
        ambiguous_variant=ambiguous,
    )


def component_attributes_from_id(component_id: str, grammar: Grammar = GRAMMAR) -> Dict[str, str]:
    """Return the ``Cvendor``/``Cclass``/... map for a component id."""
    return decompose_component_id(component_id, grammar).as_dict()
