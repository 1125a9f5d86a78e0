"""Deployment phases in pipeline order."""

from enum import Enum


class Phase(str, Enum):
    """The four fixed pipeline stages.

    Definition order is execution order; iterate the enum to walk the pipeline.
    """

    PRE_INSTALL = "pre-install"
    CREATE_INFRASTRUCTURE = "create-infrastructure"
    RUN_TESTS = "run-tests"
    DESTROY_INFRASTRUCTURE = "destroy-infrastructure"


# Phases whose failures are caught so that cleanup can still run
PROTECTED_PHASES: tuple[Phase, ...] = (Phase.CREATE_INFRASTRUCTURE, Phase.RUN_TESTS)
