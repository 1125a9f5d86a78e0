"""Human-readable and structured views of a test plan.

Both projections are pure: they never execute steps or modify the plan.
"""

import json
from typing import Any

from ..models import Phase, TestPlan


def render_text(plan: TestPlan) -> str:
    """Render a plan as plain text.

    Lists the required environment variables, then every phase in pipeline
    order with each step's location and raw shell text.
    """
    parts = ["Deployment test plan:", "", "Required environment parameters"]
    parts.extend(f"  - {name}" for name in plan.required_env_vars)

    for phase in Phase:
        parts.append(f"Steps in phase {phase.value}:")
        for step in plan.steps(phase):
            parts.append(f"- {step.identity}")
            parts.append(step.shell)

    return "\n".join(parts)


def plan_to_dict(plan: TestPlan) -> dict[str, list[dict[str, Any]]]:
    """Return the structured view: phase name to ordered step records."""
    return {
        phase.value: [
            {"line_span": list(step.line_span), "shell": step.shell.strip()}
            for step in plan.steps(phase)
        ]
        for phase in Phase
    }


def render_json(plan: TestPlan, indent: int | None = None) -> str:
    """Serialize the structured view of a plan as JSON."""
    return json.dumps(plan_to_dict(plan), indent=indent)
