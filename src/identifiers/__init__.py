"""Component, condition and pack identifier codec."""

from .codec import (
    component_attributes_from_id,
    construct_id,
    decompose_component_id,
    format_package_id,
    get_component_aggregate_id,
    get_component_id,
    get_condition_id,
    get_package_id,
    get_partial_component_id,
)
from .models import ComponentAttributes, ComponentDescriptor, PackDescriptor, VariantOwner

__all__ = [
    "ComponentAttributes",
    "ComponentDescriptor",
    "PackDescriptor",
    "VariantOwner",
    "component_attributes_from_id",
    "construct_id",
    "decompose_component_id",
    "format_package_id",
    "get_component_aggregate_id",
    "get_component_id",
    "get_condition_id",
    "get_package_id",
    "get_partial_component_id",
]
