"""
Built-in resource catalog and the category lists shown by the library UI.
"""

from typing import Dict, List

from .schema import Resource

RESOURCE_TYPE_NAMES = [
    ("all", "All Resources"),
    ("case", "Case Studies"),
    ("template", "Templates"),
    ("guide", "Guides"),
]

INDUSTRY_NAMES = [
    ("all", "All Industries"),
    ("sports", "Sports & Recreation"),
    ("entertainment", "Entertainment & Media"),
    ("technology", "Technology"),
    ("retail", "Retail & Consumer Goods"),
    ("financial", "Financial Services"),
    ("healthcare", "Healthcare"),
    ("education", "Education"),
    ("food", "Food & Beverage"),
    ("automotive", "Automotive"),
    ("other", "Other"),
]

PARTNERSHIP_TYPE_NAMES = [
    ("all", "All Types"),
    ("co-branding", "Co-Branding"),
    ("product", "Product Development"),
    ("content", "Content Creation"),
    ("distribution", "Distribution"),
    ("technology", "Technology Integration"),
    ("cause", "Cause Marketing"),
]

SORT_OPTION_NAMES = [
    ("newest", "Newest First"),
    ("oldest", "Oldest First"),
    ("relevance", "Relevance"),
    ("popularity", "Popularity"),
]


def get_resource_categories() -> Dict[str, List[Dict[str, str]]]:
    """Filter and sort options, each as ``{"id", "name"}`` entries."""
    def entries(pairs):
        return [{"id": key, "name": name} for key, name in pairs]

    return {
        "types": entries(RESOURCE_TYPE_NAMES),
        "industries": entries(INDUSTRY_NAMES),
        "partnershipTypes": entries(PARTNERSHIP_TYPE_NAMES),
        "sortOptions": entries(SORT_OPTION_NAMES),
    }


def get_sample_resources() -> List[Resource]:
    """The library's built-in resources."""
    return [
        Resource(
            id="resource1",
            title="Tech-Sports Partnership Case Study",
            description="How a leading technology company partnered with a sports league to enhance fan engagement.",
            type="case",
            industry="sports",
            partnership_type="technology",
            content=(
                "## TechCorp & National Basketball League\n\n"
                "A technology provider and a basketball league built a shared fan app, "
                "in-arena connectivity and personalized highlight feeds. Objectives were a "
                "better fan experience, higher engagement and new revenue for both partners."
            ),
            created_at="2024-12-10T09:00:00Z",
            popularity=85,
        ),
        Resource(
            id="resource2",
            title="Co-Branding Agreement Template",
            description="A comprehensive template for creating co-branding partnerships.",
            type="template",
            industry="retail",
            partnership_type="co-branding",
            content=(
                "## Co-Branding Partnership Agreement Template\n\n"
                "Sections: parties, purpose, term, brand usage and approval rights, "
                "marketing commitments, revenue sharing, intellectual property, "
                "confidentiality, termination."
            ),
            created_at="2025-01-05T14:30:00Z",
            popularity=92,
        ),
        Resource(
            id="resource3",
            title="Content Creation Partnership Guide",
            description="Best practices for establishing successful content creation partnerships.",
            type="guide",
            industry="entertainment",
            partnership_type="content",
            content=(
                "## Content Creation Partnership Guide\n\n"
                "Covers partner selection, shared editorial calendars, approval workflows, "
                "rights management and measuring content performance."
            ),
            created_at="2025-01-15T11:20:00Z",
            popularity=78,
        ),
        Resource(
            id="resource4",
            title="Financial Services Partnership ROI Study",
            description="Analysis of ROI metrics from partnerships in the financial services sector.",
            type="case",
            industry="financial",
            partnership_type="distribution",
            content=(
                "## Financial Services Partnership ROI Study\n\n"
                "Compares direct revenue, customer acquisition cost and retention across "
                "distribution partnerships between banks, insurers and fintech platforms."
            ),
            created_at="2025-02-01T09:45:00Z",
            popularity=65,
        ),
        Resource(
            id="resource5",
            title="Partnership Evaluation Framework",
            description="A structured approach to evaluating potential strategic partnerships.",
            type="template",
            industry="healthcare",
            partnership_type="cause",
            content=(
                "## Strategic Partnership Evaluation Framework\n\n"
                "Scores a prospective partner on strategic fit, cultural alignment, "
                "capabilities, financial return and risk, with a weighted decision matrix."
            ),
            created_at="2025-02-10T16:00:00Z",
            popularity=82,
        ),
        Resource(
            id="resource6",
            title="Cross-Industry Innovation Partnerships",
            description="How partnerships across different industries can drive innovation.",
            type="guide",
            industry="technology",
            partnership_type="product",
            content=(
                "## Cross-Industry Innovation Partnerships\n\n"
                "Patterns for joint product development between companies in different "
                "industries: shared labs, co-funded pilots and joint go-to-market."
            ),
            created_at="2025-02-20T10:30:00Z",
            popularity=70,
        ),
    ]
