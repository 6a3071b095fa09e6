"""Control-plane endpoint configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_number, optional_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

CONTROL_PLANE_TIMEOUT_SECONDS = 15.0
CONTROL_PLANE_MAX_RETRIES = 3
CONTROL_PLANE_CALLS_PER_SECOND = 10


@dataclass(frozen=True, slots=True)
class ControlPlaneConfig:
    """Where and how to reach the mesh control plane.

    ``mesh_owner`` is the account that owns shared meshes; leave unset for
    meshes owned by the caller.

    ``resilience.ratelimit`` (``MESHSYNC_RATE_LIMIT``) is enforced per remote
    call: each call opens its own client and limiter, so it paces the pages of
    one listing but not the sequence of calls a reconcile pass makes.
    """

    endpoint: str
    resilience: ResilienceConfig
    mesh_owner: str | None = None


def get_control_plane_config(*, resilience: ResilienceConfig | None = None) -> ControlPlaneConfig:
    values = require_env_vars(("MESHSYNC_ENDPOINT",))
    endpoint = values["MESHSYNC_ENDPOINT"].strip().rstrip("/")

    timeout = optional_env_number("MESHSYNC_TIMEOUT_SECONDS", parse=float, minimum=0.1)
    max_retries = optional_env_number("MESHSYNC_MAX_RETRIES", parse=int, minimum=0)
    rate_limit = optional_env_number("MESHSYNC_RATE_LIMIT", parse=int, minimum=1)

    return ControlPlaneConfig(
        endpoint=endpoint,
        mesh_owner=optional_env_var("MESHSYNC_MESH_OWNER"),
        resilience=resilience
        or ResilienceConfig(
            name="control-plane",
            base_url=endpoint,
            timeout_seconds=timeout if timeout is not None else CONTROL_PLANE_TIMEOUT_SECONDS,
            retry=RetryPolicy(
                total=max_retries if max_retries is not None else CONTROL_PLANE_MAX_RETRIES
            ),
            ratelimit=RateLimit(
                max_calls=rate_limit if rate_limit is not None else CONTROL_PLANE_CALLS_PER_SECOND,
                per_seconds=1.0,
            ),
            default_headers={"Accept": "application/json"},
        ),
    )
