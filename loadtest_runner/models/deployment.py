"""Models for the deployment handle passed through to executors."""

from collections.abc import Sequence

from pydantic import Field

from loadtest_runner.models.base import Model


class Host(Model):
    """A single provisioned host the scenario may target."""

    label: str = Field(..., description="Logical name of the host (e.g. 'serverHost')")
    ip: str = Field(..., description="Address or hostname of the endpoint")


class DeploymentCreationResult(Model):
    """Read-only handle to a previously provisioned target environment."""

    name: str = Field(default="", description="Deployment name")
    hosts: Sequence[Host] = Field(default_factory=list, description="Provisioned hosts")

