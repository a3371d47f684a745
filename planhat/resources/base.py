"""Base classes for Planhat resource services."""

import logging
import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, Sequence, TypeVar

from planhat.core.models import DeleteResponse, JSONModel, UpsertResponse
from planhat.core.query import ListOptions, add_options

if TYPE_CHECKING:
    from planhat.client import Client

logger = logging.getLogger(__name__)

# Documented upstream limit; callers must split larger batches themselves.
BULK_UPSERT_LIMIT = 50_000

RecordT = TypeVar("RecordT", bound=JSONModel)


def external_key(external_id: str) -> str:
    """Identifier segment for looking a record up by its external id."""
    return f"extid-{external_id}"


def source_key(source_id: str) -> str:
    """Identifier segment for looking a record up by its source id."""
    return f"srcid-{source_id}"


class Service(ABC):
    """
    Abstract base class for a group of Planhat endpoints.

    Services hold no state of their own; every call goes through the
    owning client's execute().
    """

    def __init__(self, client: "Client"):
        """
        Initialize the service.

        Args:
            client: The owning Planhat client
        """
        self.client = client

    @property
    @abstractmethod
    def resource(self) -> str:
        """
        Return the URL path segment for this resource.

        Returns:
            Path segment (e.g., 'companies', 'assets')
        """
        pass

    def _url(self, *segments: str, options: ListOptions | None = None) -> str:
        url = self.client.build_url(self.resource, *segments)
        return add_options(url, options)

    def _call(
        self,
        method: str,
        url: str,
        payload: Any = None,
        decode: Callable[[Any], Any] | None = None,
        cancel: threading.Event | None = None,
        timeout: float | None = None,
    ) -> Any:
        request = self.client.build_request(method, url, payload)
        return self.client.execute(request, decode, cancel=cancel, timeout=timeout)


class RecordService(Service, Generic[RecordT]):
    """
    Service for resources supporting the standard record endpoints.

    Subclasses set ``record_cls`` and ``resource``.
    """

    record_cls: type[RecordT]

    def get(self, id: str, *, cancel=None, timeout=None) -> RecordT:
        """
        Get a single record by its Planhat id.

        The id may also be an alternate key such as ``extid-...`` or
        ``srcid-...``.
        """
        record = self._call("GET", self._url(id), decode=self.record_cls.from_dict,
                            cancel=cancel, timeout=timeout)
        return record if record is not None else self.record_cls()

    def get_by_external_id(self, external_id: str, *, cancel=None, timeout=None) -> RecordT:
        """Get a single record using its external id."""
        return self.get(external_key(external_id), cancel=cancel, timeout=timeout)

    def get_by_source_id(self, source_id: str, *, cancel=None, timeout=None) -> RecordT:
        """Get a single record using its source id."""
        return self.get(source_key(source_id), cancel=cancel, timeout=timeout)

    def create(self, record: RecordT, *, cancel=None, timeout=None) -> RecordT:
        """
        Create a new record.

        Returns:
            The created record, or an empty record when the API answers
            201 without a usable body
        """
        created = self._call("POST", self._url(), payload=record.to_dict(),
                             decode=self.record_cls.from_dict, cancel=cancel, timeout=timeout)
        return created if created is not None else self.record_cls()

    def update(self, id: str, record: RecordT, *, cancel=None, timeout=None) -> RecordT:
        """
        Update a record.

        The id may be the Planhat id or an alternate key (``extid-...``,
        ``srcid-...``).
        """
        updated = self._call("PUT", self._url(id), payload=record.to_dict(),
                             decode=self.record_cls.from_dict, cancel=cancel, timeout=timeout)
        return updated if updated is not None else self.record_cls()

    def delete(self, id: str, *, cancel=None, timeout=None) -> DeleteResponse:
        """Delete a record by its Planhat id."""
        response = self._call("DELETE", self._url(id), decode=DeleteResponse.from_dict,
                              cancel=cancel, timeout=timeout)
        return response if response is not None else DeleteResponse()

    def bulk_upsert(self, records: Sequence[RecordT], *, cancel=None, timeout=None) -> UpsertResponse:
        """
        Create or update many records in one request.

        Records are matched on ``_id``, ``sourceId`` or ``externalId``.
        At most BULK_UPSERT_LIMIT items are accepted per request; this is
        not checked here.
        """
        payload = [record.to_dict() for record in records]
        logger.debug(f"Bulk upserting {len(payload)} {self.resource}")
        response = self._call("PUT", self._url(), payload=payload,
                              decode=UpsertResponse.from_dict, cancel=cancel, timeout=timeout)
        return response if response is not None else UpsertResponse()

    def _list(self, options: ListOptions | None, record_cls: type[JSONModel] | None = None,
              path: str | None = None, cancel=None, timeout=None) -> list:
        record_cls = record_cls or self.record_cls
        if path is None:
            url = self._url(options=options)
        else:
            url = add_options(self.client.build_url(path), options)
        records = self._call("GET", url, decode=record_cls.from_list, cancel=cancel, timeout=timeout)
        return records if records is not None else []
