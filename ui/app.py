"""
Strategic Alliance Builder UI

A Streamlit application for building a brand profile, finding compatible
partners, assessing partnership ROI and running collaboration workspaces.

Design: calm consultancy aesthetic
- Soft neutral palette (off-white, charcoal, subtle indigo accent)
- Large hero score displays
- One page per task, selected from the sidebar

Run with: streamlit run ui/app.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pandas as pd
import streamlit as st

from alliance.configs import load_config
from alliance.data_loading import generate_sample_partners
from alliance.library import create_ranker_from_config, get_resource_categories
from alliance.matching import (
    BrandProfile,
    create_scorer_from_config,
    filter_partners,
    partners_to_frame,
)
from alliance.matching.schema import Industry, CompanySize, GeographicFocus, PartnershipObjective
from alliance.projects import (
    ProgressConfig,
    calculate_progress,
    create_collaboration,
    add_task,
    update_task,
    add_milestone,
    update_milestone,
    add_note,
    generate_sample_collaboration,
)
from alliance.roi import create_engine_from_config
from alliance.roi.schema import STRATEGIC_FACTOR_NAMES, RISK_FACTOR_NAMES
from alliance.storage import AppStore, StorageConfig, DataImportError

# =============================================================================
# CONSTANTS
# =============================================================================

CONFIG_PATH = project_root / "configs" / "config.yaml"

PAGES = ["Dashboard", "Brand Profile", "Partner Matching", "ROI Assessment", "Workspaces", "Resource Library", "Settings"]

# =============================================================================
# DESIGN SYSTEM - Colors & Styles
# =============================================================================

COLORS = {
    "background": "#FAFAFA",
    "card_bg": "#FFFFFF",
    "text_primary": "#2D3748",
    "text_secondary": "#718096",
    "accent": "#5A67D8",  # Subtle indigo
    "accent_light": "#EBF4FF",
    "border": "#E2E8F0",
    "success": "#48BB78",
    "warning": "#ED8936",
    "error": "#F56565",
}


def inject_custom_css():
    """Inject custom CSS for the page layout."""
    st.markdown(f"""
    <style>
        .stApp {{
            background-color: {COLORS['background']};
        }}

        h1, h2, h3 {{
            color: {COLORS['text_primary']} !important;
            font-weight: 600 !important;
        }}

        .hero-score-container {{
            text-align: center;
            padding: 2rem 1rem;
            background: {COLORS['card_bg']};
            border: 1px solid {COLORS['border']};
            border-radius: 16px;
            margin: 1rem 0;
        }}

        .hero-score {{
            font-size: 4rem;
            font-weight: 700;
            color: {COLORS['text_primary']};
            line-height: 1;
        }}

        .hero-score-label {{
            font-size: 0.9rem;
            color: {COLORS['text_secondary']};
            text-transform: uppercase;
            letter-spacing: 0.1em;
            margin-bottom: 0.75rem;
        }}

        .info-banner {{
            background: {COLORS['accent_light']};
            border-left: 3px solid {COLORS['accent']};
            padding: 1rem 1.25rem;
            border-radius: 0 8px 8px 0;
            margin: 1rem 0;
        }}

        #MainMenu {{visibility: hidden;}}
        footer {{visibility: hidden;}}
    </style>
    """, unsafe_allow_html=True)

# =============================================================================
# ENUM DISPLAY MAPPINGS
# =============================================================================

INDUSTRY_NAMES = {
    "sports": "Sports & Recreation",
    "entertainment": "Entertainment & Media",
    "technology": "Technology",
    "retail": "Retail & Consumer Goods",
    "financial": "Financial Services",
    "healthcare": "Healthcare",
    "education": "Education",
    "food": "Food & Beverage",
    "automotive": "Automotive",
    "other": "Other",
}

COMPANY_SIZE_NAMES = {
    "startup": "Startup (1-10 employees)",
    "small": "Small (11-50 employees)",
    "medium": "Medium (51-250 employees)",
    "large": "Large (251-1000 employees)",
    "enterprise": "Enterprise (1000+ employees)",
}

VALUE_NAMES = {
    "innovation": "Innovation",
    "quality": "Quality",
    "sustainability": "Sustainability",
    "diversity": "Diversity & Inclusion",
    "community": "Community",
    "customer": "Customer Focus",
    "integrity": "Integrity",
    "excellence": "Excellence",
    "authenticity": "Authenticity",
    "teamwork": "Teamwork",
    "creativity": "Creativity",
    "social": "Social Responsibility",
}

METRIC_TYPES = {"numeric": "Numeric", "percentage": "Percentage", "currency": "Currency", "scale": "Scale (1-5)"}
METRIC_FREQUENCIES = {
    "once": "One-time",
    "weekly": "Weekly",
    "monthly": "Monthly",
    "quarterly": "Quarterly",
    "annually": "Annually",
}

# Percent-scale inputs; everything else is a 0-5 rating
PERCENT_FACTORS = {"audienceReach": 30, "audienceOverlap": 100, "brandVisibility": 100}

# =============================================================================
# COMPONENT FUNCTIONS
# =============================================================================

@st.cache_resource
def load_app_config():
    """Load and cache the application configuration."""
    return load_config(str(CONFIG_PATH))


def get_store() -> AppStore:
    """One store per browser session, loaded from disk on first use."""
    if "store" not in st.session_state:
        config = load_app_config()
        storage = StorageConfig.from_config(config)
        storage.path = str(project_root / storage.path)
        store = AppStore(storage)
        store.load()
        if store.ensure_initialized():
            st.session_state["first_run"] = True
        st.session_state["store"] = store
    return st.session_state["store"]


def label(names: dict, key: str) -> str:
    return names.get(key, key)


def render_hero_score(title: str, score: int, caption: str = ""):
    st.markdown(f"""
    <div class="hero-score-container">
        <div class="hero-score-label">{title}</div>
        <div class="hero-score">{score}</div>
        <p style="color: {COLORS['text_secondary']}; margin-top: 0.5rem;">{caption}</p>
    </div>
    """, unsafe_allow_html=True)


def render_dashboard(store: AppStore):
    """Render profile status, workspace progress and recent activity."""
    st.header("Dashboard")
    if st.session_state.pop("first_run", False):
        st.markdown(
            '<div class="info-banner"><p>Welcome! Start by creating your brand profile, '
            'then explore compatible partners.</p></div>',
            unsafe_allow_html=True,
        )

    profile = store.get_profile()
    col1, col2, col3 = st.columns(3)
    col1.metric("Profile", "Complete" if profile else "Not created")
    col2.metric("Partners", len(store.data["partners"]))
    col3.metric("Workspaces", len(store.data["collaborations"]))

    progress_config = ProgressConfig.from_config(load_app_config())
    collaborations = store.get_collaborations()
    if collaborations:
        st.subheader("Active collaborations")
        for collaboration in collaborations:
            report = calculate_progress(collaboration, config=progress_config)
            st.write(f"**{collaboration.name}** with {collaboration.partner_name} - {report.status}")
            st.progress(report.overall_progress / 100)

    st.subheader("Recent activity")
    if not store.data["activities"]:
        st.caption("No activity yet.")
    for activity in store.data["activities"]:
        st.write(f"{activity['timestamp'][:16].replace('T', ' ')}  {activity['description']}")


def render_profile_page(store: AppStore):
    """Render the brand profile form."""
    st.header("Brand Profile")
    current = store.get_profile() or BrandProfile()

    def index_of(options, value):
        return options.index(value) if value in options else 0

    industries = [i.value for i in Industry]
    sizes = [s.value for s in CompanySize]
    focuses = [g.value for g in GeographicFocus]
    objectives = [o.value for o in PartnershipObjective]

    with st.form("profile-form"):
        brand_name = st.text_input("Brand name", value=current.brand_name)
        brand_description = st.text_area("Brand description", value=current.brand_description)
        industry = st.selectbox("Industry", industries, index=index_of(industries, current.industry),
                                format_func=lambda k: label(INDUSTRY_NAMES, k))
        company_size = st.selectbox("Company size", sizes, index=index_of(sizes, current.company_size),
                                    format_func=lambda k: label(COMPANY_SIZE_NAMES, k))
        geographic_focus = st.selectbox("Geographic focus", focuses, index=index_of(focuses, current.geographic_focus),
                                        format_func=str.title)
        values = st.multiselect("Brand values", list(VALUE_NAMES), default=[v for v in current.values if v in VALUE_NAMES],
                                format_func=lambda k: label(VALUE_NAMES, k))
        chosen_objectives = st.multiselect("Partnership objectives", objectives,
                                           default=[o for o in current.objectives if o in objectives],
                                           format_func=str.title)
        submitted = st.form_submit_button("Save profile")

    if submitted:
        if not brand_name or not values or not chosen_objectives:
            st.error("Please provide a brand name, at least one value and at least one objective.")
            return
        current.brand_name = brand_name
        current.brand_description = brand_description
        current.industry = industry
        current.company_size = company_size
        current.geographic_focus = geographic_focus
        current.values = values
        current.objectives = chosen_objectives
        store.set_profile(current)
        st.success("Profile saved.")


def render_matching_page(store: AppStore):
    """Render partner search, ranking and the compatibility report."""
    st.header("Partner Matching")
    profile = store.get_profile()
    if profile is None:
        st.info("Create your brand profile first.")
        return

    if not store.data["partners"]:
        if st.button("Load sample partners"):
            store.set_partners(generate_sample_partners())
            store.add_activity("Loaded sample partners")
            st.rerun()
        return

    col1, col2 = st.columns(2)
    industry = col1.selectbox("Industry filter", [""] + list(INDUSTRY_NAMES),
                              format_func=lambda k: label(INDUSTRY_NAMES, k) if k else "Any")
    size = col2.selectbox("Company size filter", [""] + list(COMPANY_SIZE_NAMES),
                          format_func=lambda k: label(COMPANY_SIZE_NAMES, k) if k else "Any")

    candidates = filter_partners(store.get_partners(), {"industry": industry, "companySize": size})
    scorer = create_scorer_from_config(load_app_config())
    ranked = scorer.find_most_promising_partners(profile, candidates, limit=len(candidates))
    if not ranked:
        st.warning("No partners match these filters.")
        return

    st.dataframe(partners_to_frame(ranked), use_container_width=True, hide_index=True)

    names = {p.profile.id: p.profile.brand_name or p.profile.id for p in ranked}
    selected = st.selectbox("View compatibility report", list(names), format_func=names.get)
    partner = next(p.profile for p in ranked if p.profile.id == selected)
    report = scorer.generate_report(profile, partner)

    render_hero_score("Compatibility", report.overall_score, partner.brand_name)
    st.bar_chart(pd.Series(report.dimension_scores.to_dict(), name="score"))

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Strengths")
        for item in report.strengths or ["None identified"]:
            st.write(f"- {item}")
    with col2:
        st.subheader("Weaknesses")
        for item in report.weaknesses or ["None identified"]:
            st.write(f"- {item}")
    st.subheader("Recommendations")
    for item in report.recommendations:
        st.write(f"- {item}")
    st.caption("Suggested partnership types: " + ", ".join(report.suggested_partnership_types))


def render_roi_page(store: AppStore):
    """Render the partnership assessment form and results."""
    st.header("ROI Assessment")

    with st.form("roi-form"):
        st.subheader("Investment")
        col1, col2, col3 = st.columns(3)
        investment = {
            "directCosts": col1.number_input("Direct costs", min_value=0.0, step=1000.0),
            "staffHours": col2.number_input("Staff hours", min_value=0.0, step=10.0),
            "hourlyRate": col3.number_input("Hourly rate", min_value=0.0, step=5.0),
            "marketingCosts": col1.number_input("Marketing costs", min_value=0.0, step=500.0),
            "technologyCosts": col2.number_input("Technology costs", min_value=0.0, step=500.0),
            "otherCosts": col3.number_input("Other costs", min_value=0.0, step=500.0),
        }

        st.subheader("Returns")
        col1, col2, col3 = st.columns(3)
        returns = {
            "directRevenue": col1.number_input("Monthly revenue", min_value=0.0, step=500.0),
            "costSavings": col2.number_input("Monthly cost savings", min_value=0.0, step=100.0),
            "newCustomers": col3.number_input("New customers", min_value=0.0, step=10.0),
            "customerLTV": col1.number_input("Customer lifetime value", min_value=0.0, step=10.0),
            "otherReturns": col2.number_input("Other returns", min_value=0.0, step=500.0),
        }
        timeframe = col3.number_input("Timeframe (months)", min_value=1, value=12)

        with st.expander("Strategic factors"):
            strategic = {
                name: st.slider(name, 0, PERCENT_FACTORS.get(name, 5), 0, key=f"s_{name}")
                for name in STRATEGIC_FACTOR_NAMES
            }
        with st.expander("Risk factors"):
            risk = {name: st.slider(name, 0, 5, 0, key=f"r_{name}") for name in RISK_FACTOR_NAMES}

        submitted = st.form_submit_button("Assess partnership")

    if not submitted:
        return

    engine = create_engine_from_config(load_app_config())
    assessment = engine.calculate_partnership_roi({
        "investment": investment,
        "returns": returns,
        "timeframeMonths": timeframe,
        "strategicFactors": strategic,
        "riskFactors": risk,
    })
    store.add_activity("Ran partnership ROI assessment")

    render_hero_score("Partnership Score", assessment.overall_score, assessment.recommendation)
    col1, col2, col3 = st.columns(3)
    if assessment.financial_roi is not None:
        col1.metric("ROI", f"{assessment.financial_roi.roi_percentage}%")
        col1.metric("Net return", f"{assessment.financial_roi.net_return:,.0f}")
    col2.metric("Strategic value", assessment.strategic_value.overall_score)
    col3.metric("Risk", f"{assessment.risk_assessment.overall_risk} ({assessment.risk_assessment.risk_level})")

    st.bar_chart(pd.Series(assessment.strategic_value.dimension_scores, name="strategic value"))
    st.bar_chart(pd.Series(assessment.risk_assessment.risk_scores, name="risk"))
    for item in assessment.risk_assessment.recommendations:
        st.write(f"- {item}")


def render_workspaces_page(store: AppStore):
    """Render collaboration workspaces with tasks, milestones and notes."""
    st.header("Workspaces")

    with st.expander("New workspace"):
        with st.form("workspace-form"):
            name = st.text_input("Workspace name")
            partner_name = st.text_input("Partner name")
            start_date = st.date_input("Start date")
            end_date = st.date_input("End date", value=None)
            description = st.text_area("Description")
            create = st.form_submit_button("Create workspace")
        if create:
            collaboration = create_collaboration({
                "name": name,
                "partnerName": partner_name,
                "description": description,
                "startDate": start_date.isoformat() if start_date else None,
                "endDate": end_date.isoformat() if end_date else None,
            })
            store.upsert_collaboration(collaboration)
            store.add_activity(f"Created workspace: {collaboration.name}")
            st.rerun()
        if st.button("Add sample workspace"):
            collaboration = generate_sample_collaboration()
            store.upsert_collaboration(collaboration)
            store.add_activity(f"Created workspace: {collaboration.name}")
            st.rerun()

    collaborations = store.get_collaborations()
    if not collaborations:
        st.caption("No workspaces yet.")
        return

    names = {c.id: c.name for c in collaborations}
    selected = st.selectbox("Workspace", list(names), format_func=names.get)
    collaboration = store.get_collaboration(selected)
    report = calculate_progress(collaboration, config=ProgressConfig.from_config(load_app_config()))

    col1, col2, col3 = st.columns(3)
    col1.metric("Progress", f"{report.overall_progress}%")
    col2.metric("Status", report.status)
    col3.metric("Days remaining", "-" if report.days_remaining is None else report.days_remaining)

    st.subheader("Tasks")
    for task in collaboration.tasks:
        done = st.checkbox(f"{task.title} ({task.status})", value=task.status == "completed", key=f"task_{task.id}")
        if done != (task.status == "completed"):
            collaboration = update_task(collaboration, task.id, {"status": "completed" if done else "pending"})
            store.upsert_collaboration(collaboration)
            st.rerun()
    with st.form("task-form", clear_on_submit=True):
        title = st.text_input("New task")
        if st.form_submit_button("Add task") and title:
            store.upsert_collaboration(add_task(collaboration, {"title": title}))
            st.rerun()

    st.subheader("Milestones")
    for milestone in collaboration.milestones:
        done = st.checkbox(f"{milestone.title} (due {milestone.due_date or '-'})",
                           value=milestone.status == "completed", key=f"milestone_{milestone.id}")
        if done != (milestone.status == "completed"):
            collaboration = update_milestone(collaboration, milestone.id, {"status": "completed" if done else "pending"})
            store.upsert_collaboration(collaboration)
            st.rerun()
    with st.form("milestone-form", clear_on_submit=True):
        title = st.text_input("New milestone")
        due = st.date_input("Due date", value=None)
        if st.form_submit_button("Add milestone") and title:
            store.upsert_collaboration(add_milestone(collaboration, {
                "title": title,
                "dueDate": due.isoformat() if due else None,
            }))
            st.rerun()

    st.subheader("Notes")
    for note in collaboration.notes:
        st.markdown(f"**{note.title}**  \n{note.content}")
    with st.form("note-form", clear_on_submit=True):
        title = st.text_input("Note title")
        content = st.text_area("Note")
        if st.form_submit_button("Add note") and content:
            store.upsert_collaboration(add_note(collaboration, {"title": title, "content": content}))
            st.rerun()

    if st.button("Delete workspace"):
        store.remove_collaboration(collaboration.id)
        store.add_activity(f"Deleted workspace: {collaboration.name}")
        st.rerun()


def render_library_page(store: AppStore):
    """Render the resource library with filters and recommendations."""
    st.header("Resource Library")
    ranker = create_ranker_from_config(load_app_config())
    categories = get_resource_categories()

    def options(key):
        return {entry["id"]: entry["name"] for entry in categories[key]}

    types, industries, partnership_types, sorts = (
        options("types"), options("industries"), options("partnershipTypes"), options("sortOptions")
    )
    col1, col2, col3, col4 = st.columns(4)
    filters = {
        "type": col1.selectbox("Type", list(types), format_func=types.get),
        "industry": col2.selectbox("Industry", list(industries), format_func=industries.get),
        "partnershipType": col3.selectbox("Partnership type", list(partnership_types), format_func=partnership_types.get),
        "query": st.text_input("Search"),
    }
    sort_by = col4.selectbox("Sort", list(sorts), format_func=sorts.get)

    for resource in ranker.search(filters, sort_by):
        with st.expander(f"{resource.title}  ({types.get(resource.type, resource.type)})"):
            st.caption(resource.description)
            st.markdown(resource.content)
            related = ranker.related(resource)
            if related:
                st.caption("Related: " + ", ".join(r.resource.title for r in related))

    profile = store.get_profile()
    if profile is not None:
        st.subheader("Recommended for you")
        for ranked in ranker.recommended(profile):
            st.write(f"- {ranked.resource.title} (relevance {ranked.relevance_score})")


def render_settings_page(store: AppStore):
    """Render display settings, custom metrics and data management."""
    st.header("Settings")
    settings = store.data["settings"]

    col1, col2, col3 = st.columns(3)
    themes = ["default", "dark", "light"]
    sizes = ["small", "medium", "large"]
    theme = col1.selectbox("Theme", themes, index=themes.index(settings["theme"]) if settings["theme"] in themes else 0)
    font_size = col2.selectbox("Font size", sizes,
                               index=sizes.index(settings["fontSize"]) if settings["fontSize"] in sizes else 1)
    compact_view = col3.checkbox("Compact view", value=bool(settings["compactView"]))
    if (theme, font_size, compact_view) != (settings["theme"], settings["fontSize"], settings["compactView"]):
        store.update_settings(theme=theme, fontSize=font_size, compactView=compact_view)

    st.subheader("Custom metrics")
    for metric in store.data["customMetrics"]:
        col1, col2 = st.columns([4, 1])
        col1.write(f"**{metric['name']}** - {label(METRIC_TYPES, metric['type'])}, "
                   f"{label(METRIC_FREQUENCIES, metric['frequency'])}")
        if col2.button("Delete", key=f"metric_{metric['id']}"):
            store.delete_custom_metric(metric["id"])
            st.rerun()
    with st.form("metric-form", clear_on_submit=True):
        name = st.text_input("Metric name")
        description = st.text_input("Description")
        metric_type = st.selectbox("Type", list(METRIC_TYPES), format_func=METRIC_TYPES.get)
        frequency = st.selectbox("Frequency", list(METRIC_FREQUENCIES), format_func=METRIC_FREQUENCIES.get)
        if st.form_submit_button("Add metric") and name:
            store.add_custom_metric({
                "name": name,
                "description": description,
                "type": metric_type,
                "frequency": frequency,
            })
            st.rerun()

    st.subheader("Data")
    st.download_button("Export data", store.export_json(), file_name="strategic-alliance-builder-data.json",
                       mime="application/json")
    uploaded = st.file_uploader("Import data", type="json")
    if uploaded is not None and st.button("Replace my data with this file"):
        try:
            store.import_json(uploaded.getvalue())
            store.add_activity("Imported data")
            st.success("Data imported successfully.")
        except DataImportError as e:
            st.error(f"Error importing data: {e}")

    confirmation = st.text_input("Type DELETE to clear all data")
    if st.button("Clear all data", disabled=confirmation != "DELETE"):
        store.clear()
        st.success("All data has been cleared.")

# =============================================================================
# MAIN APPLICATION
# =============================================================================

def main():
    """Main application entry point."""
    st.set_page_config(
        page_title="Strategic Alliance Builder",
        page_icon="",
        layout="wide",
    )

    inject_custom_css()
    store = get_store()

    page = st.sidebar.radio("Navigate", PAGES)
    renderers = {
        "Dashboard": render_dashboard,
        "Brand Profile": render_profile_page,
        "Partner Matching": render_matching_page,
        "ROI Assessment": render_roi_page,
        "Workspaces": render_workspaces_page,
        "Resource Library": render_library_page,
        "Settings": render_settings_page,
    }
    renderers[page](store)


if __name__ == "__main__":
    main()
