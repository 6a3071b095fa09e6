"""Pydantic models describing the App Mesh route API payloads."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DurationUnitValue = Literal["s", "ms"]


class AppMeshBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, alias_generator=to_camel)


class DurationPayload(AppMeshBaseModel):
    unit: DurationUnitValue
    value: int


class WeightedTargetPayload(AppMeshBaseModel):
    virtual_node: str
    weight: int
    port: int | None = None


class RouteActionPayload(AppMeshBaseModel):
    weighted_targets: list[WeightedTargetPayload] | None = None


class MatchRangePayload(AppMeshBaseModel):
    start: int
    end: int


class HeaderMatchMethodPayload(AppMeshBaseModel):
    exact: str | None = None
    prefix: str | None = None
    suffix: str | None = None
    regex: str | None = None
    range: MatchRangePayload | None = None


class HttpRouteHeaderPayload(AppMeshBaseModel):
    name: str
    match: HeaderMatchMethodPayload | None = None
    invert: bool | None = None


class HttpPathMatchPayload(AppMeshBaseModel):
    exact: str | None = None
    regex: str | None = None


class QueryParameterMatchPayload(AppMeshBaseModel):
    exact: str | None = None


class HttpQueryParameterPayload(AppMeshBaseModel):
    name: str
    match: QueryParameterMatchPayload | None = None


class HttpRouteMatchPayload(AppMeshBaseModel):
    prefix: str | None = None
    path: HttpPathMatchPayload | None = None
    method: str | None = None
    scheme: str | None = None
    headers: list[HttpRouteHeaderPayload] | None = None
    query_parameters: list[HttpQueryParameterPayload] | None = None
    port: int | None = None


class HttpRetryPolicyPayload(AppMeshBaseModel):
    max_retries: int
    per_retry_timeout: DurationPayload
    http_retry_events: list[str] | None = None
    tcp_retry_events: list[str] | None = None


class HttpTimeoutPayload(AppMeshBaseModel):
    per_request: DurationPayload | None = None
    idle: DurationPayload | None = None


class HttpRoutePayload(AppMeshBaseModel):
    match: HttpRouteMatchPayload
    action: RouteActionPayload
    retry_policy: HttpRetryPolicyPayload | None = None
    timeout: HttpTimeoutPayload | None = None


class TcpRouteMatchPayload(AppMeshBaseModel):
    port: int | None = None


class TcpTimeoutPayload(AppMeshBaseModel):
    idle: DurationPayload | None = None


class TcpRoutePayload(AppMeshBaseModel):
    action: RouteActionPayload
    match: TcpRouteMatchPayload | None = None
    timeout: TcpTimeoutPayload | None = None


class GrpcRouteMetadataPayload(AppMeshBaseModel):
    name: str
    match: HeaderMatchMethodPayload | None = None
    invert: bool | None = None


class GrpcRouteMatchPayload(AppMeshBaseModel):
    service_name: str | None = None
    method_name: str | None = None
    metadata: list[GrpcRouteMetadataPayload] | None = None
    port: int | None = None


class GrpcRetryPolicyPayload(AppMeshBaseModel):
    max_retries: int
    per_retry_timeout: DurationPayload
    grpc_retry_events: list[str] | None = None
    http_retry_events: list[str] | None = None
    tcp_retry_events: list[str] | None = None


class GrpcRoutePayload(AppMeshBaseModel):
    match: GrpcRouteMatchPayload
    action: RouteActionPayload
    retry_policy: GrpcRetryPolicyPayload | None = None
    timeout: HttpTimeoutPayload | None = None


class RouteSpecPayload(AppMeshBaseModel):
    priority: int | None = None
    http_route: HttpRoutePayload | None = None
    http2_route: HttpRoutePayload | None = None
    grpc_route: GrpcRoutePayload | None = None
    tcp_route: TcpRoutePayload | None = None


class ResourceMetadataPayload(AppMeshBaseModel):
    arn: str | None = None
    created_at: datetime | None = None
    last_updated_at: datetime | None = None
    mesh_owner: str | None = None
    resource_owner: str | None = None
    uid: str | None = None
    version: int | None = None


class RouteStatusPayload(AppMeshBaseModel):
    status: str


class RouteDataPayload(AppMeshBaseModel):
    mesh_name: str
    virtual_router_name: str
    route_name: str
    spec: RouteSpecPayload
    metadata: ResourceMetadataPayload = Field(default_factory=ResourceMetadataPayload)
    status: RouteStatusPayload | None = None


class RouteRefPayload(AppMeshBaseModel):
    mesh_name: str
    virtual_router_name: str
    route_name: str
    mesh_owner: str | None = None
    resource_owner: str | None = None
    arn: str | None = None
    version: int | None = None


class ListRoutesResponse(AppMeshBaseModel):
    routes: list[RouteRefPayload] = Field(default_factory=list)
    next_token: str | None = None


class ErrorResponse(AppMeshBaseModel):
    message: str | None = Field(default=None, alias="message")
    upper_message: str | None = Field(default=None, alias="Message")
    error_type: str | None = Field(default=None, alias="__type")

    @property
    def text(self) -> str | None:
        return self.message or self.upper_message


class CreateRouteRequest(AppMeshBaseModel):
    route_name: str
    spec: RouteSpecPayload
    client_token: str | None = None


class UpdateRouteRequest(AppMeshBaseModel):
    spec: RouteSpecPayload
    client_token: str | None = None
