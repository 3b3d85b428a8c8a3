"""Database models for users and articles."""

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import Column, DateTime, Integer, LargeBinary, String, Text

from .. import domain

db: SQLAlchemy = SQLAlchemy()


class DBUser(db.Model):  # type: ignore
    """
    Registered users.

    +-------------------+----------+------+-----+----------------+
    | Field             | Type     | Null | Key | Extra          |
    +-------------------+----------+------+-----+----------------+
    | id                | int      | NO   | PRI | auto_increment |
    | name              | text     | NO   | UNI |                |
    | pass_hash         | blob     | NO   |     |                |
    | registration_date | datetime | NO   |     |                |
    | status            | text     | YES  |     |                |
    +-------------------+----------+------+-----+----------------+
    """

    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), unique=True, nullable=False)
    pass_hash = Column(LargeBinary, nullable=False)
    registration_date = Column(DateTime, nullable=False)
    status = Column(Text)

    def to_domain(self) -> domain.User:
        """Generate a :class:`.domain.User` (without the password hash)."""
        return domain.User(
            user_id=self.id,
            username=self.name,
            registration_date=self.registration_date,
            status=self.status or ''
        )


class DBArticle(db.Model):  # type: ignore
    """
    Blog articles.

    ``author_id`` is not a foreign key: removing a user leaves
    their articles in place.
    """

    __tablename__ = 'articles'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    publish_date = Column(DateTime, nullable=False)
    author_id = Column(Integer, nullable=False, index=True)

    def to_domain(self) -> domain.Article:
        """Generate a :class:`.domain.Article`."""
        return domain.Article(
            article_id=self.id,
            title=self.title,
            content=self.content,
            publish_date=self.publish_date,
            author_id=self.author_id
        )
