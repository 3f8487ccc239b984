"""Growth defaults queries"""
from dataclasses import dataclass
from typing import Tuple

from ....mediator import Request, RequestHandler
from ....domain.livestock.species import Species, ManagementSystem
from ....domain.livestock.defaults import (
    GrowthDefaults,
    resolve_defaults,
    legal_management_systems,
)


@dataclass(frozen=True)
class ResolveDefaultsQuery(Request[GrowthDefaults]):
    """Query for the growth defaults of a species/management pair"""
    species: Species
    management: ManagementSystem


class ResolveDefaultsHandler(RequestHandler[ResolveDefaultsQuery, GrowthDefaults]):
    """Handler for ResolveDefaultsQuery"""

    async def handle(self, request: ResolveDefaultsQuery) -> GrowthDefaults:
        """
        Raises:
            InvalidCombinationError: If the pairing is not legal
        """
        return resolve_defaults(request.species, request.management)


@dataclass(frozen=True)
class ListManagementSystemsQuery(Request[Tuple[ManagementSystem, ...]]):
    """Query for the management systems available to a species"""
    species: Species


class ListManagementSystemsHandler(RequestHandler[ListManagementSystemsQuery, Tuple[ManagementSystem, ...]]):
    """Handler for ListManagementSystemsQuery"""

    async def handle(self, request: ListManagementSystemsQuery) -> Tuple[ManagementSystem, ...]:
        return legal_management_systems(request.species)
