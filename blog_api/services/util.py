"""Helpers shared by the services."""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional, Type

from ..auth import guard
from ..storage import exceptions as storage
from .. import domain
from . import exceptions

logger = logging.getLogger(__name__)

ErrorMap = Dict[Type[storage.StorageError], Type[exceptions.ServiceError]]


@contextmanager
def storage_errors(op: str, resource_id: Any = None,
                   mapping: Optional[ErrorMap] = None) \
        -> Generator[None, None, None]:
    """
    Translate storage exceptions raised in the block into service errors.

    Cancellation always becomes :class:`.exceptions.Canceled` (or
    :class:`.exceptions.DeadlineExceeded`). Storage exceptions listed in
    ``mapping`` become the corresponding service error; any other storage
    failure becomes :class:`.exceptions.InternalError`. The failure is
    logged here, once.

    Parameters
    ----------
    op : str
        Name of the operation, for logs and error metadata.
    resource_id
        Identifier of the user/article concerned, if any.
    mapping : dict
        Storage exception classes to service exception classes.

    """
    extra = {'op': op, 'resource_id': resource_id}
    try:
        yield
    except storage.DeadlineExceeded as e:
        logger.warning('Deadline exceeded: %s', e, extra=extra)
        raise exceptions.DeadlineExceeded(op, resource_id) from e
    except storage.Canceled as e:
        logger.warning('Canceled: %s', e, extra=extra)
        raise exceptions.Canceled(op, resource_id) from e
    except storage.StorageError as e:
        for storage_error, service_error in (mapping or {}).items():
            if isinstance(e, storage_error):
                logger.info('%s: %s', op, service_error.message, extra=extra)
                raise service_error(op, resource_id) from e
        logger.error('Storage failure: %s', e, extra=extra)
        raise exceptions.InternalError(op, resource_id) from e


def require_owner(op: str, claims: Optional[domain.Claims],
                  owner_id: int) -> None:
    """
    Raise :class:`.exceptions.Forbidden` unless ``claims`` belong to the owner.

    :class:`.AuthContextError` from the guard is passed through unchanged.
    """
    if not guard.check_owner(claims, owner_id):
        logger.info('Subject is not the owner', extra={
            'op': op, 'resource_id': owner_id,
            'uid': getattr(claims, 'uid', None)
        })
        raise exceptions.Forbidden(op, owner_id)
