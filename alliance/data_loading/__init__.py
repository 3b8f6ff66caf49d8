"""Data loading module for brand profiles, partner pools and partnership cases."""

from .loaders import load_partner_pool, load_brand_profile, load_partnership_case
from .samples import generate_sample_partners, sample_brand_profile, sample_partnership_case

__all__ = [
    "load_partner_pool",
    "load_brand_profile",
    "load_partnership_case",
    "generate_sample_partners",
    "sample_brand_profile",
    "sample_partnership_case",
]
