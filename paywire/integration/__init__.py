"""Integration module for building Razorpay checkout plans.

Public API:
    IntegrationPlanGenerator(credentials).generate(...) -> IntegrationPlan
"""

from paywire.integration.generator import IntegrationPlanGenerator
from paywire.integration.types import (
    ActionKind,
    BackendFramework,
    CodeChange,
    FrontendFramework,
    Instructional,
    IntegrationPlan,
    InvalidFileAction,
    Language,
)

__all__ = [
    "IntegrationPlanGenerator",
    "IntegrationPlan",
    "CodeChange",
    "Instructional",
    "InvalidFileAction",
    "ActionKind",
    "Language",
    "BackendFramework",
    "FrontendFramework",
]
