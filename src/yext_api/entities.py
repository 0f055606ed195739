"""Types for Knowledge Graph entities.

An entity is a dict whose keys are field ids and whose values are field
values, plus an optional ``meta`` object. Only ``name`` is common to every
entity type, so it is the only field declared here; other fields are
ordinary dict keys. Define your own TypedDicts extending Entity for the
entity types enabled in your account.

See: https://hitchhikers.yext.com/docs/knowledgeapis/knowledgegraph/entities/entities/
"""

from typing import TypedDict

from yext_api.fields import AddressValue


class EntityMeta(TypedDict, total=False):
    accountId: str
    countryCode: str
    entityType: str
    folderId: str
    id: str
    labels: list[int]
    language: str
    timestamp: str
    uid: str


class Entity(TypedDict, total=False):
    meta: EntityMeta
    name: str


class Location(Entity, total=False):
    """The built-in Location entity type (retail stores, offices, ...).

    Only a subset of Location's fields is modeled.
    """

    address: AddressValue
