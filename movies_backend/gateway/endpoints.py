"""
Endpoint definitions and the resolver that maps logical paths onto them.

The registry is declared once at import time and never mutated. Every logical path
the gateway serves has exactly one definition; paths that match no pattern resolve
to a `ClientInput` failure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from movies_backend.gateway.outcomes import ClientInput, MethodNotAllowed

ALLOWED_METHOD = "GET"

STATIC_CATEGORIES = frozenset({"popular", "top_rated", "upcoming", "now_playing"})


def split_path(path: str) -> tuple[str, ...]:
    """Split a logical path into segments, ignoring a trailing slash."""
    trimmed = (path or "").strip()
    if not trimmed.startswith("/"):
        trimmed = f"/{trimmed}"
    if len(trimmed) > 1:
        trimmed = trimmed.rstrip("/")
    if trimmed == "/":
        return ()
    return tuple(trimmed[1:].split("/"))


def _is_placeholder(segment: str) -> bool:
    return segment.startswith("{") and segment.endswith("}")


class AuthMode(str, Enum):
    BEARER = "bearer"
    LEGACY_API_KEY = "legacy_api_key"


class ParamLocation(str, Enum):
    PATH = "path"
    QUERY = "query"


@dataclass(frozen=True)
class ParamSpec:
    name: str
    location: ParamLocation = ParamLocation.QUERY
    kind: type = str
    default: int | str | None = None
    description: str = ""
    # Message used when a required parameter is absent.
    missing_message: str | None = None
    choices: frozenset[str] | None = None

    @property
    def type_name(self) -> str:
        return "number" if self.kind is int else "string"


@dataclass(frozen=True)
class EndpointDefinition:
    name: str
    pattern: str
    upstream_path: str
    summary: str
    auth_mode: AuthMode = AuthMode.BEARER
    required: tuple[ParamSpec, ...] = ()
    optional: tuple[ParamSpec, ...] = ()
    # Always sent upstream, never taken from the caller.
    fixed_params: tuple[tuple[str, str], ...] = ()
    method: str = ALLOWED_METHOD
    example: str = ""
    segments: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", split_path(self.pattern))

    @property
    def key(self) -> tuple[str, str]:
        return (self.method, self.pattern)

    @property
    def params(self) -> tuple[ParamSpec, ...]:
        return self.required + self.optional

    def path_param(self, placeholder: str) -> ParamSpec | None:
        for spec in self.required:
            if spec.location is ParamLocation.PATH and spec.name == placeholder:
                return spec
        return None


@dataclass(frozen=True)
class Resolution:
    definition: EndpointDefinition
    path_params: Mapping[str, str]


def _page() -> ParamSpec:
    return ParamSpec("page", kind=int, default=1, description="Page number (default 1)")


def _movie_id() -> ParamSpec:
    return ParamSpec(
        "id",
        location=ParamLocation.PATH,
        description="Movie ID",
        missing_message="Missing movie id",
    )


ENDPOINTS: tuple[EndpointDefinition, ...] = (
    EndpointDefinition(
        name="genres",
        pattern="/genres",
        upstream_path="/genre/movie/list",
        summary="List all movie genres",
        example="/genres",
    ),
    EndpointDefinition(
        name="movie_search",
        pattern="/movies/search",
        upstream_path="/search/movie",
        summary="Search movies by title",
        required=(
            ParamSpec(
                "query",
                description="Search term",
                missing_message='Missing required "query" parameter',
            ),
        ),
        optional=(_page(),),
        example="/movies/search?query=batman&page=1",
    ),
    EndpointDefinition(
        name="movie_discover",
        pattern="/movies/discover",
        upstream_path="/discover/movie",
        summary="Discover movies by genre, cast, or sort order",
        optional=(
            ParamSpec("with_genres", description="Genre ID to filter by"),
            ParamSpec("with_cast", description="Person ID to filter by cast"),
            _page(),
            ParamSpec("sort_by", description="Sort field (e.g. popularity.desc)"),
        ),
        example="/movies/discover?with_genres=28&page=1&sort_by=popularity.desc",
    ),
    EndpointDefinition(
        name="movie_category",
        pattern="/movies/{category}",
        upstream_path="/movie/{category}",
        summary="List a static movie category: " + ", ".join(sorted(STATIC_CATEGORIES)),
        auth_mode=AuthMode.LEGACY_API_KEY,
        required=(
            ParamSpec(
                "category",
                location=ParamLocation.PATH,
                description="Static category name",
                missing_message="Missing movie id",
                choices=STATIC_CATEGORIES,
            ),
        ),
        optional=(_page(),),
        example="/movies/popular?page=1",
    ),
    EndpointDefinition(
        name="movie_details",
        pattern="/movies/{id}",
        upstream_path="/movie/{id}",
        summary="Get movie details with videos appended",
        required=(_movie_id(),),
        fixed_params=(("append_to_response", "videos"),),
        example="/movies/550",
    ),
    EndpointDefinition(
        name="movie_credits",
        pattern="/movies/{id}/credits",
        upstream_path="/movie/{id}/credits",
        summary="Get cast and crew for a movie",
        required=(_movie_id(),),
        example="/movies/550/credits",
    ),
    EndpointDefinition(
        name="movie_recommendations",
        pattern="/movies/{id}/recommendations",
        upstream_path="/movie/{id}/recommendations",
        summary="Get recommended movies based on a specific movie",
        required=(_movie_id(),),
        optional=(_page(),),
        example="/movies/550/recommendations?page=1",
    ),
    EndpointDefinition(
        name="person",
        pattern="/person/{id}",
        upstream_path="/person/{id}",
        summary="Get person (actor/director) details",
        required=(
            ParamSpec(
                "id",
                location=ParamLocation.PATH,
                description="Person ID",
                missing_message="Missing person id",
            ),
        ),
        example="/person/287",
    ),
    EndpointDefinition(
        name="configuration",
        pattern="/configuration",
        upstream_path="/configuration",
        summary="Get TMDb image configuration (base URLs, sizes)",
        example="/configuration",
    ),
)


def _build_registry(definitions: tuple[EndpointDefinition, ...]) -> Mapping[tuple[str, str], EndpointDefinition]:
    registry: dict[tuple[str, str], EndpointDefinition] = {}
    for definition in definitions:
        if definition.key in registry:
            raise ValueError(f"Duplicate endpoint definition for {definition.key!r}")
        registry[definition.key] = definition
    return MappingProxyType(registry)


REGISTRY = _build_registry(ENDPOINTS)


def _match(definition: EndpointDefinition, segments: tuple[str, ...]) -> tuple[int, dict[str, str]] | None:
    """Return (specificity, path params) when `segments` fit the definition's pattern."""
    if len(definition.segments) != len(segments):
        return None

    specificity = 0
    params: dict[str, str] = {}
    for expected, actual in zip(definition.segments, segments):
        if not _is_placeholder(expected):
            if expected != actual:
                return None
            specificity += 2
            continue

        name = expected[1:-1]
        spec = definition.path_param(name)
        if spec is not None and spec.choices is not None:
            if actual not in spec.choices:
                return None
            specificity += 1
        params[name] = actual
    return specificity, params


def resolve(method: str, path: str) -> Resolution | ClientInput | MethodNotAllowed:
    """
    Resolve an inbound (method, logical path) pair to its endpoint definition.

    The most specific pattern wins: literal segments beat placeholders, and a placeholder
    restricted to a closed set of tokens (the static categories) beats an open one.
    Movie tokens are never validated here; a bad id is left for upstream to reject.
    """

    segments = split_path(path)
    best: tuple[int, EndpointDefinition, dict[str, str]] | None = None
    for definition in ENDPOINTS:
        matched = _match(definition, segments)
        if matched is None:
            continue
        specificity, params = matched
        if best is None or specificity > best[0]:
            best = (specificity, definition, params)

    if best is None:
        return ClientInput(message=f"Unknown endpoint: /{'/'.join(segments)}")

    _, definition, params = best
    if REGISTRY.get(((method or "").upper(), definition.pattern)) is None:
        return MethodNotAllowed(method=(method or "").upper())
    return Resolution(definition=definition, path_params=MappingProxyType(params))
