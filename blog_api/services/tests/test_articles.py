"""Tests for :class:`blog_api.services.ArticleService`."""

from datetime import datetime, timedelta
from unittest import TestCase, mock

from pytz import UTC

from .. import ArticleService, exceptions
from ...auth.exceptions import AuthContextError
from ...storage import exceptions as storage
from ... import domain


def _claims(uid: int) -> domain.Claims:
    return domain.Claims(uid=uid, exp=datetime.now(tz=UTC) + timedelta(hours=1))


def _article(article_id: int = 10, author_id: int = 1) -> domain.Article:
    return domain.Article(title='Title', content='Body', author_id=author_id,
                          article_id=article_id,
                          publish_date=datetime.now(tz=UTC))


class ArticleServiceTestCase(TestCase):

    def setUp(self):
        self.store = mock.MagicMock()
        self.store.article_by_id.return_value = _article()
        self.service = ArticleService(self.store)


class TestReads(ArticleServiceTestCase):
    """Reads are public."""

    def test_list(self):
        """All articles are returned."""
        self.store.list_articles.return_value = [_article(1), _article(2)]
        self.assertEqual([a.article_id for a in self.service.list()], [1, 2])

    def test_get(self):
        """An article by id."""
        self.assertEqual(self.service.get_by_id(10).article_id, 10)
        self.store.article_by_id.assert_called_once_with(10)

    def test_get_missing(self):
        """Unknown ids are reported as not found."""
        self.store.article_by_id.side_effect = storage.NoSuchArticle('nope')
        with self.assertRaises(exceptions.ArticleNotFound):
            self.service.get_by_id(10)

    def test_list_fails(self):
        """Storage failures are internal errors."""
        self.store.list_articles.side_effect = storage.StorageError('down')
        with self.assertRaises(exceptions.InternalError):
            self.service.list()


class TestCreate(ArticleServiceTestCase):
    """Tests for :meth:`.ArticleService.create`."""

    def test_create(self):
        """Users may publish as themselves."""
        self.store.create_article.return_value = _article()
        self.service.create(_claims(1), 1, 'Title', 'Body')
        args = self.store.create_article.call_args[0]
        self.assertEqual(args[:3], (1, 'Title', 'Body'))
        self.assertIsInstance(args[3], datetime)

    def test_create_as_someone_else(self):
        """Users may not publish as someone else."""
        with self.assertRaises(exceptions.Forbidden):
            self.service.create(_claims(2), 1, 'Title', 'Body')
        self.assertEqual(self.store.create_article.call_count, 0)

    def test_empty_fields(self):
        """Title and content are required."""
        with self.assertRaises(exceptions.ValidationError):
            self.service.create(_claims(1), 1, '', 'Body')
        with self.assertRaises(exceptions.ValidationError):
            self.service.create(_claims(1), 1, 'Title', '')
        self.assertEqual(self.store.create_article.call_count, 0)

    def test_author_gone(self):
        """The author may have been removed in the meantime."""
        self.store.create_article.side_effect = storage.NoSuchUser('gone')
        with self.assertRaises(exceptions.UserNotFound):
            self.service.create(_claims(1), 1, 'Title', 'Body')

    def test_conflict(self):
        """A conflicting article."""
        self.store.create_article.side_effect = storage.ArticleExists('dup')
        with self.assertRaises(exceptions.ArticleExists):
            self.service.create(_claims(1), 1, 'Title', 'Body')


class TestUpdate(ArticleServiceTestCase):
    """Tests for :meth:`.ArticleService.update`."""

    def test_update_own(self):
        """Authors may update their articles."""
        self.service.update(_claims(1), 10, title='New')
        self.store.update_article.assert_called_once_with(
            10, title='New', content=None
        )

    def test_update_content_only(self):
        """Content may be updated without the title."""
        self.service.update(_claims(1), 10, title='', content='New body')
        self.store.update_article.assert_called_once_with(
            10, title=None, content='New body'
        )

    def test_owner_is_stored_author(self):
        """Ownership is checked against the stored author."""
        self.store.article_by_id.return_value = _article(author_id=7)
        with self.assertRaises(exceptions.Forbidden):
            self.service.update(_claims(1), 10, title='Mine now')
        self.assertEqual(self.store.update_article.call_count, 0)

        self.service.update(_claims(7), 10, title='Still mine')
        self.assertEqual(self.store.update_article.call_count, 1)

    def test_update_missing(self):
        """Updating an article that does not exist."""
        self.store.article_by_id.side_effect = storage.NoSuchArticle('nope')
        with self.assertRaises(exceptions.ArticleNotFound):
            self.service.update(_claims(1), 10, title='New')

    def test_nothing_to_update(self):
        """An empty update changes nothing."""
        article = self.service.update(_claims(1), 10)
        self.assertEqual(article.article_id, 10)
        self.assertEqual(self.store.update_article.call_count, 0)

    def test_deadline(self):
        """Running out of time while updating."""
        self.store.update_article.side_effect = \
            storage.DeadlineExceeded('late')
        with self.assertRaises(exceptions.DeadlineExceeded):
            self.service.update(_claims(1), 10, title='New')


class TestRemove(ArticleServiceTestCase):
    """Tests for :meth:`.ArticleService.remove`."""

    def test_remove_own(self):
        """Authors may remove their articles."""
        self.service.remove(_claims(1), 10)
        self.store.remove_article.assert_called_once_with(10)

    def test_remove_other(self):
        """Others may not."""
        with self.assertRaises(exceptions.Forbidden):
            self.service.remove(_claims(2), 10)
        self.assertEqual(self.store.remove_article.call_count, 0)

    def test_no_claims(self):
        """Missing claims are a server fault, never a pass."""
        with self.assertRaises(AuthContextError):
            self.service.remove(None, 10)
        self.assertEqual(self.store.remove_article.call_count, 0)

    def test_canceled(self):
        """Cancellation while fetching the article."""
        self.store.article_by_id.side_effect = storage.Canceled('stop')
        with self.assertRaises(exceptions.Canceled):
            self.service.remove(_claims(1), 10)
