"""Pipeline orchestration for the asset steps."""

from .orchestrator import STEPS, Orchestrator

__all__ = ["Orchestrator", "STEPS"]
