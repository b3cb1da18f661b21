"""Typed access to WCIF extension payloads.

A WCIF extension is ``{"id": <namespace>, "specUrl": <url>, "data": <payload>}``.
The resolver maps each registered namespace to a payload model. Namespaces
it does not know are passed through untouched so documents round-trip even
when they carry extensions from tools this library has never heard of.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from wcif_types import delegate_dashboard, groupifier
from wcif_types.models import ExtensionPayload, ExtensionSchemaMismatch, field_violations

logger = logging.getLogger("wcif_types.extensions")


@dataclass(frozen=True)
class ExtensionSpec:
    """Registration of one extension namespace."""

    namespace: str
    model: Type[ExtensionPayload]
    schema_version: str
    schema_name: str
    spec_url: Optional[str] = None

    def decode(self, payload: Any) -> ExtensionPayload:
        """Validate a raw payload against this namespace's model.

        Raises:
            ExtensionSchemaMismatch: If the payload is missing a required
                field or a field has the wrong type or value.
        """
        try:
            return self.model.model_validate(payload)
        except PydanticValidationError as e:
            violations = field_violations(e)
            raise ExtensionSchemaMismatch(
                self.namespace, violations[0].field, violations
            ) from e


class ResolvedExtension(BaseModel):
    """An extension whose payload was decoded by a registered model."""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(..., min_length=1, description="Extension id as found in the document")
    schema_version: str = Field(..., description="Version of the registered schema")
    spec_url: Optional[str] = Field(None, description="specUrl as found in the document")
    payload: ExtensionPayload = Field(..., description="Typed payload")

    def to_wcif(self) -> Dict[str, Any]:
        return {
            "id": self.namespace,
            "specUrl": self.spec_url,
            "data": self.payload.to_wcif(),
        }


class UnrecognizedExtension(BaseModel):
    """An extension with no registered decoder, kept exactly as found."""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(..., description="Extension id as found in the document")
    spec_url: Optional[str] = Field(None, description="specUrl as found in the document")
    payload: Any = Field(None, description="Untouched payload")

    def to_wcif(self) -> Dict[str, Any]:
        return {"id": self.namespace, "specUrl": self.spec_url, "data": self.payload}


Extension = Union[ResolvedExtension, UnrecognizedExtension]


class ExtensionResolver:
    """Immutable namespace -> decoder table.

    Build one with the specs you need; the table cannot be changed
    afterwards. Use :meth:`extended` to derive a resolver with more specs.
    """

    def __init__(self, specs: Iterable[ExtensionSpec]) -> None:
        by_namespace: Dict[str, ExtensionSpec] = {}
        by_spec_url: Dict[str, ExtensionSpec] = {}
        for spec in specs:
            if spec.namespace in by_namespace:
                raise ValueError(f"Duplicate extension namespace: {spec.namespace!r}")
            by_namespace[spec.namespace] = spec
            if spec.spec_url is not None:
                by_spec_url.setdefault(spec.spec_url, spec)
        self._by_namespace: Mapping[str, ExtensionSpec] = MappingProxyType(by_namespace)
        self._by_spec_url: Mapping[str, ExtensionSpec] = MappingProxyType(by_spec_url)

    @property
    def specs(self) -> Mapping[str, ExtensionSpec]:
        return self._by_namespace

    def namespaces(self) -> FrozenSet[str]:
        return frozenset(self._by_namespace)

    def extended(self, *specs: ExtensionSpec) -> "ExtensionResolver":
        """Return a new resolver with these specs added."""
        return ExtensionResolver((*self._by_namespace.values(), *specs))

    def resolve(
        self,
        namespace: str,
        payload: Any,
        spec_url: Optional[str] = None,
    ) -> Extension:
        """Decode a payload registered under an exact namespace.

        Args:
            namespace: The extension id, e.g. ``"groupifier.RoomConfig"``.
            payload: The JSON-decoded ``data`` value.
            spec_url: The extension's ``specUrl``, carried through to the
                result.

        Returns:
            ResolvedExtension if a decoder is registered for namespace,
            otherwise UnrecognizedExtension holding payload unchanged.

        Raises:
            ExtensionSchemaMismatch: If the registered decoder rejects the
                payload.
        """
        spec = self._by_namespace.get(namespace)
        if spec is None:
            logger.debug("Passing through unrecognized extension %r", namespace)
            return UnrecognizedExtension(
                namespace=namespace, spec_url=spec_url, payload=payload
            )
        return self._decode(spec, namespace, payload, spec_url)

    def resolve_node(self, node: Mapping[str, Any]) -> Extension:
        """Decode a raw WCIF extension object.

        When the id is not registered but the specUrl belongs to a
        registered schema, that schema is used and the id is kept as-is.

        Raises:
            ExtensionSchemaMismatch: If the node itself is malformed or the
                registered decoder rejects its data.
        """
        if not isinstance(node, Mapping):
            raise ExtensionSchemaMismatch("", "$")
        namespace = node.get("id")
        if not isinstance(namespace, str) or not namespace:
            raise ExtensionSchemaMismatch(str(namespace), "id")
        spec_url = node.get("specUrl")
        if spec_url is not None and not isinstance(spec_url, str):
            raise ExtensionSchemaMismatch(namespace, "specUrl")
        if "data" not in node:
            raise ExtensionSchemaMismatch(namespace, "data")

        spec = self._by_namespace.get(namespace)
        if spec is None and spec_url is not None:
            spec = self._by_spec_url.get(spec_url)
            if spec is not None:
                logger.debug(
                    "Extension %r resolved as %r by its specUrl", namespace, spec.namespace
                )
        if spec is None:
            return self.resolve(namespace, node["data"], spec_url)
        return self._decode(spec, namespace, node["data"], spec_url)

    @staticmethod
    def _decode(
        spec: ExtensionSpec, namespace: str, payload: Any, spec_url: Optional[str]
    ) -> ResolvedExtension:
        return ResolvedExtension(
            namespace=namespace,
            schema_version=spec.schema_version,
            spec_url=spec_url,
            payload=spec.decode(payload),
        )


def _groupifier_spec(
    namespace: str, model: Type[ExtensionPayload], schema_name: str
) -> ExtensionSpec:
    return ExtensionSpec(
        namespace=namespace,
        model=model,
        schema_version=groupifier.SCHEMA_VERSION,
        schema_name=schema_name,
        spec_url=groupifier.spec_url(namespace),
    )


BUILTIN_SPECS: Tuple[ExtensionSpec, ...] = (
    _groupifier_spec(
        groupifier.ACTIVITY_CONFIG, groupifier.ActivityConfig, "groupifier_activity_config"
    ),
    _groupifier_spec(
        groupifier.COMPETITION_CONFIG, groupifier.CompetitionConfig, "groupifier_competition_config"
    ),
    _groupifier_spec(
        groupifier.ROOM_CONFIG, groupifier.RoomConfig, "groupifier_room_config"
    ),
    _groupifier_spec(
        groupifier.ROOM_CONFIGURATION, groupifier.RoomConfiguration, "groupifier_room_configuration"
    ),
    _groupifier_spec(
        groupifier.ASSIGNMENT_SCHEDULE, groupifier.AssignmentSchedule, "groupifier_assignment_schedule"
    ),
    _groupifier_spec(
        groupifier.RESULT_DISPLAY, groupifier.ResultDisplay, "groupifier_result_display"
    ),
    ExtensionSpec(
        namespace=delegate_dashboard.GROUPS,
        model=delegate_dashboard.GroupsConfig,
        schema_version=delegate_dashboard.SCHEMA_VERSION,
        schema_name="delegate_dashboard_groups",
        spec_url=delegate_dashboard.GROUPS_SPEC_URL,
    ),
)

DEFAULT_RESOLVER: ExtensionResolver = ExtensionResolver(BUILTIN_SPECS)


def resolve_extension(
    namespace: str, payload: Any, spec_url: Optional[str] = None
) -> Extension:
    """Resolve a payload with the built-in registry. See :meth:`ExtensionResolver.resolve`."""
    return DEFAULT_RESOLVER.resolve(namespace, payload, spec_url)


def resolve_extension_node(node: Mapping[str, Any]) -> Extension:
    """Resolve a raw extension object with the built-in registry."""
    return DEFAULT_RESOLVER.resolve_node(node)
