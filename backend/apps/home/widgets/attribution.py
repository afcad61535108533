"""
Attribution widget - revenue overview, revenue by show and tracked links.
"""
from typing import Optional

from core.formatting import number_format, round_int
from core.models import AttributionData
from core.rendering import home_url, render_template

from apps import FragmentManifest
from apps.home.services import HomeContext


def get_fragment_manifest() -> FragmentManifest:
    return FragmentManifest(
        fragment_id="attribution",
        label="Revenue Attribution",
        icon="fa-solid fa-chart-line",
        order=80,
        render_path="apps.home.widgets.attribution:render",
    )


def build_attribution_context(data: Optional[AttributionData]) -> dict:
    data = data or AttributionData()
    summary = data.revenue_summary

    metrics = []
    shows = []
    # An empty summary object is treated as no summary at all.
    if summary is not None and summary.model_fields_set:
        metrics = [
            {"value": "$" + number_format(summary.total_actual), "label": "Actual Revenue"},
            {"value": "$" + number_format(summary.total_pipeline), "label": "Pipeline Value"},
            {"value": "$" + number_format(summary.total_commission), "label": "Commission"},
        ]
        if summary.roi_percentage:
            metrics.append({"value": f"{round_int(summary.roi_percentage)}%", "label": "ROI"})
        shows = [
            {
                "title": show.podcast_title,
                "appearances": show.appearance_count,
                "estimated": "$" + number_format(show.total_estimated),
                "actual": "$" + number_format(show.total_actual),
            }
            for show in data.revenue_by_show
        ]

    links = [
        {
            "name": row.name,
            "link": row.link,
            "clicks": number_format(row.clicks),
            "leads": number_format(row.leads),
            "revenue": "$" + number_format(row.revenue),
        }
        for row in data.links
    ]

    return {
        "metrics": metrics,
        "shows": shows,
        "links": links,
        "analytics_url": home_url("/app/analytics/"),
    }


def render_attribution(data: Optional[AttributionData]) -> str:
    return render_template("home/attribution.html", **build_attribution_context(data))


async def render(ctx: HomeContext) -> str:
    return render_attribution(ctx.dashboard.attribution)
