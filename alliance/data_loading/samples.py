"""
Built-in demonstration data: a partner pool, a brand profile and a
partnership case.
"""

from typing import List

from ..matching.schema import BrandProfile
from ..roi.schema import PartnershipCase


def generate_sample_partners() -> List[BrandProfile]:
    """Six demonstration partners across industries, sizes and regions."""
    return [
        BrandProfile(
            id="partner1",
            brand_name="TechInnovate",
            brand_description="A leading technology company focused on innovative solutions for businesses.",
            industry="technology",
            company_size="large",
            geographic_focus="global",
            values=["innovation", "quality", "integrity"],
            objectives=["product", "innovation"],
        ),
        BrandProfile(
            id="partner2",
            brand_name="SportsFit",
            brand_description="Sports and fitness brand dedicated to promoting active lifestyles.",
            industry="sports",
            company_size="medium",
            geographic_focus="national",
            values=["community", "excellence", "authenticity"],
            objectives=["audience", "content"],
        ),
        BrandProfile(
            id="partner3",
            brand_name="MediaStream",
            brand_description="Entertainment and media company providing streaming services.",
            industry="entertainment",
            company_size="enterprise",
            geographic_focus="international",
            values=["creativity", "customer", "diversity"],
            objectives=["content", "audience"],
        ),
        BrandProfile(
            id="partner4",
            brand_name="EcoGoods",
            brand_description="Sustainable consumer goods company with eco-friendly products.",
            industry="retail",
            company_size="small",
            geographic_focus="regional",
            values=["sustainability", "social", "integrity"],
            objectives=["credibility", "sales"],
        ),
        BrandProfile(
            id="partner5",
            brand_name="FinSecure",
            brand_description="Financial services company providing banking and investment solutions.",
            industry="financial",
            company_size="large",
            geographic_focus="national",
            values=["integrity", "excellence", "customer"],
            objectives=["credibility", "audience"],
        ),
        BrandProfile(
            id="partner6",
            brand_name="HealthPlus",
            brand_description="Healthcare provider focused on accessible and quality care.",
            industry="healthcare",
            company_size="medium",
            geographic_focus="national",
            values=["quality", "integrity", "community"],
            objectives=["audience", "credibility"],
        ),
    ]


def sample_brand_profile() -> BrandProfile:
    return BrandProfile(
        brand_name="Acme Outdoor",
        brand_description="Outdoor apparel brand for weekend adventurers.",
        industry="retail",
        company_size="medium",
        geographic_focus="national",
        values=["sustainability", "community", "quality"],
        objectives=["audience", "credibility"],
    )


def sample_partnership_case() -> PartnershipCase:
    """A mid-sized co-marketing case with moderate risk."""
    return PartnershipCase.from_dict({
        "investment": {
            "directCosts": 20000,
            "staffHours": 200,
            "hourlyRate": 60,
            "marketingCosts": 8000,
        },
        "returns": {
            "directRevenue": 4000,
            "costSavings": 500,
            "newCustomers": 150,
            "customerLTV": 120,
        },
        "timeframeMonths": 12,
        "strategicFactors": {
            "audienceReach": 8,
            "audienceOverlap": 40,
            "audienceEngagement": 4,
            "brandAlignment": 4,
            "reputationEnhancement": 3,
            "brandVisibility": 60,
            "innovationPotential": 3,
            "technologyAccess": 2,
            "ipCreation": 1,
            "newMarketAccess": 4,
            "channelExpansion": 3,
            "competitiveAdvantage": 3,
            "strategicAlignment": 4,
            "longTermPotential": 4,
            "ecosystemIntegration": 2,
        },
        "riskFactors": {
            "investmentSize": 2,
            "revenueUncertainty": 3,
            "costOverrunRisk": 2,
            "partnerReputationRisk": 1,
            "brandAlignmentRisk": 2,
            "integrationComplexity": 2,
            "resourceConflictRisk": 2,
            "timelineRisk": 3,
            "goalMisalignmentRisk": 1,
            "dependencyRisk": 2,
            "competitiveDisclosureRisk": 1,
        },
    })
