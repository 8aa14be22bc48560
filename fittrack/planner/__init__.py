"""Training-plan generator: resolve → filter → split → synthesize → assemble."""

from fittrack.planner.assembler import generate_plan, plan_name
from fittrack.planner.config import plan_request_from_profile, resolve_plan_config

__all__ = ["generate_plan", "plan_name", "plan_request_from_profile", "resolve_plan_config"]
