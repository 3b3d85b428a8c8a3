"""Tests for :mod:`blog_api.services.util`."""

from unittest import TestCase

from .. import exceptions
from ..util import storage_errors
from ...storage import exceptions as storage


class TestStorageErrors(TestCase):
    """Tests for :func:`.storage_errors`."""

    def test_mapped(self):
        """Listed storage errors become the given service error."""
        with self.assertRaises(exceptions.UserNotFound) as ctx:
            with storage_errors('op', 5,
                                {storage.NoSuchUser: exceptions.UserNotFound}):
                raise storage.NoSuchUser('nope')
        self.assertEqual(ctx.exception.op, 'op')
        self.assertEqual(ctx.exception.resource_id, 5)

    def test_unmapped(self):
        """Anything else from storage is internal."""
        with self.assertRaises(exceptions.InternalError):
            with storage_errors('op', 5,
                                {storage.NoSuchUser: exceptions.UserNotFound}):
                raise storage.NoSuchArticle('nope')

    def test_cancellation(self):
        """Cancellation is never mapped to something else."""
        with self.assertRaises(exceptions.DeadlineExceeded):
            with storage_errors('op', mapping={
                    storage.StorageError: exceptions.UserNotFound}):
                raise storage.DeadlineExceeded('late')
        with self.assertRaises(exceptions.Canceled):
            with storage_errors('op'):
                raise storage.Canceled('stop')

    def test_other_exceptions(self):
        """Non-storage exceptions pass through untouched."""
        with self.assertRaises(KeyError):
            with storage_errors('op'):
                raise KeyError('foo')
