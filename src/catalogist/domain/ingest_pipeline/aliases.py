"""Alias normalization.

Edges may name a resource by an alternate title declared through the
resource's ``alias`` parameter. The alias table maps each alias identifier to
the identifier of the resource declaring it (same type only), and edges are
rewritten through it so they only ever name true resources.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeAlias

from catalogist.domain.errors import DuplicateAliasError, MalformedPayloadError
from catalogist.domain.ingest_pipeline.orchestrator import PipelinePhase
from catalogist.domain.model import DuplicatePolicy, ResourceIdentifier

if TYPE_CHECKING:
    from collections.abc import Iterable

    from catalogist.domain.ingest_pipeline.context import CatalogDraft, PipelineContext
    from catalogist.domain.model import AliasTable, DependencyEdge, Resource, ResourceMap

log = getLogger(__name__)

ALIAS_PARAMETER = "alias"

AliasEntry: TypeAlias = tuple[ResourceIdentifier, ResourceIdentifier]


def alias_values(parameters: Mapping[str, object]) -> tuple[str, ...]:
    """Read the ``alias`` parameter as a sequence of zero or more titles."""

    value = parameters.get(ALIAS_PARAMETER)
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list | tuple) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise MalformedPayloadError(
        "Resource alias is malformed",
        errors=(f"parameters.alias: expected a string or list of strings, got {value!r}",),
    )


def aliases_for_resource(resource: Resource) -> tuple[AliasEntry, ...]:
    """Return ``(alias, true identifier)`` pairs declared by ``resource``."""

    identifier = resource.identifier
    try:
        titles = alias_values(resource.parameters)
    except MalformedPayloadError as exc:
        raise MalformedPayloadError(
            f"Resource '{identifier}' declares a malformed alias", errors=exc.errors
        ) from exc
    return tuple((identifier.with_title(title), identifier) for title in titles if title)


@dataclass(frozen=True, slots=True)
class CollectedAliases:
    table: AliasTable
    overwritten: tuple[ResourceIdentifier, ...] = ()


def collect_aliases(
    resources: ResourceMap,
    *,
    policy: DuplicatePolicy = DuplicatePolicy.OVERWRITE,
) -> CollectedAliases:
    """Collect every resource's aliases into one lookup table.

    A repeated alias naming a different resource follows ``policy``: the later
    declaration wins (with a warning) or ``DuplicateAliasError`` is raised.
    """

    table: dict[ResourceIdentifier, ResourceIdentifier] = {}
    overwritten: list[ResourceIdentifier] = []
    for resource in resources.values():
        for alias, target in aliases_for_resource(resource):
            previous = table.get(alias)
            if previous is not None and previous != target:
                if policy is DuplicatePolicy.REJECT:
                    raise DuplicateAliasError(alias=alias, previous=previous, current=target)
                log.warning(
                    "Alias %s is declared by %s and %s; keeping the last", alias, previous, target
                )
                overwritten.append(alias)
            if alias != target and alias in resources:
                log.warning("Alias %s shadows an existing resource; edges use %s", alias, target)
            table[alias] = target
    return CollectedAliases(table=MappingProxyType(table), overwritten=tuple(overwritten))


def build_alias_table(
    resources: ResourceMap,
    *,
    policy: DuplicatePolicy = DuplicatePolicy.OVERWRITE,
) -> AliasTable:
    return collect_aliases(resources, policy=policy).table


def resolve_edges(
    edges: Iterable[DependencyEdge], aliases: AliasTable
) -> frozenset[DependencyEdge]:
    """Rewrite both endpoints of every edge through the alias table.

    Identifiers without an alias entry stay as they are. Edges that become
    identical after substitution collapse into one.
    """

    def resolve(identifier: ResourceIdentifier) -> ResourceIdentifier:
        return aliases.get(identifier, identifier)

    return frozenset(
        edge.rewired(source=resolve(edge.source), target=resolve(edge.target)) for edge in edges
    )


class AliasResolutionPhase(PipelinePhase):
    name: str = "alias_resolution"

    def run(self, draft: CatalogDraft, *, context: PipelineContext) -> CatalogDraft:
        resources = draft.require(draft.resources, "resources")
        edges = draft.require(draft.edges, "edges")

        collected = collect_aliases(resources, policy=context.settings.duplicate_policy)
        aliases = collected.table
        resolved = resolve_edges(edges, aliases)

        context.counters.aliases_overwritten += len(collected.overwritten)
        context.counters.alias_edges_collapsed += len(edges) - len(resolved)
        log.debug("Resolved %d aliases across %d edges", len(aliases), len(edges))
        return replace(draft, aliases=aliases, edges=resolved)
