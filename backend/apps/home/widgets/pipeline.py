"""
Pipeline widget - the five delivery steps from discovery to aired episodes.

Each step shows its count; steps with a conversion rate show a badge once the
dashboard service has computed that rate.
"""
from typing import Optional

from core.formatting import number_format
from core.models import PipelineData
from core.rendering import render_template

from apps import FragmentManifest
from apps.home.services import HomeContext

PIPELINE_STEPS = [
    {
        "id": "discovery",
        "class": "step-found",
        "icon": "fa-magnifying-glass",
        "label": "Discovery",
        "value_key": "shows_found",
        "desc": "Shows Found",
        "rate_key": "vetted_rate",
        "rate_suffix": "Vetted",
    },
    {
        "id": "intel",
        "class": "step-research",
        "icon": "fa-flask",
        "label": "Intel",
        "value_key": "shows_researched",
        "desc": "Shows Researched",
        "rate_key": "pitched_rate",
        "rate_suffix": "Pitched",
    },
    {
        "id": "action",
        "class": "step-pitch",
        "icon": "fa-paper-plane",
        "label": "Action",
        "value_key": "pitches_sent",
        "desc": "Pitches Sent",
        "rate_key": "booked_rate",
        "rate_suffix": "Booked",
        "actionable": True,
    },
    {
        "id": "result",
        "class": "step-book",
        "icon": "fa-calendar-check",
        "label": "Result",
        "value_key": "interviews_booked",
        "desc": "Interviews Booked",
        "rate_key": "aired_rate",
        "rate_suffix": "Aired",
    },
    {
        "id": "success",
        "class": "step-air",
        "icon": "fa-microphone-lines",
        "label": "Success",
        "value_key": "episodes_aired",
        "desc": "Episodes Aired",
    },
]


def get_fragment_manifest() -> FragmentManifest:
    return FragmentManifest(
        fragment_id="pipeline",
        label="Pipeline",
        icon="fa-solid fa-diagram-next",
        order=70,
        render_path="apps.home.widgets.pipeline:render",
    )


def build_pipeline_steps(data: Optional[PipelineData]) -> list:
    data = data or PipelineData()
    steps = []
    for step in PIPELINE_STEPS:
        rate = getattr(data, step["rate_key"]) if "rate_key" in step else None
        steps.append({
            "id": step["id"],
            "class": step["class"],
            "icon": step["icon"],
            "label": step["label"],
            "value": number_format(getattr(data, step["value_key"])),
            "desc": step["desc"],
            "actionable": step.get("actionable", False),
            "rate": None if rate is None else f"{rate:g}% {step['rate_suffix']}",
        })
    return steps


def render_pipeline(data: Optional[PipelineData]) -> str:
    return render_template("home/pipeline.html", steps=build_pipeline_steps(data))


async def render(ctx: HomeContext) -> str:
    return render_pipeline(ctx.dashboard.pipeline)
