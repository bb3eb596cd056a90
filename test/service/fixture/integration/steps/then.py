from pytest_bdd import parsers, then
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from fixture_context.platform.config.di import container
from fixture_context.platform.database.orm_db_setting import get_engine
from test.service.fixture.integration.models import AuthorModel, BookModel


def _count(model: type) -> int:
    with Session(get_engine()) as session:
        return session.scalar(select(func.count()).select_from(model)) or 0


@then(parsers.parse('there are {count:d} authors in the database'))
def verify_author_count(count: int) -> None:
    assert _count(AuthorModel) == count


@then(parsers.parse('there are {count:d} books in the database'))
def verify_book_count(count: int) -> None:
    assert _count(BookModel) == count


@then(parsers.parse('the author {author_id:d} is named "{name}"'))
def verify_author_name(author_id: int, name: str) -> None:
    with Session(get_engine()) as session:
        author = session.get(AuthorModel, author_id)
        assert author is not None
        assert author.name == name


@then(parsers.parse('the book "{title}" is written by "{name}"'))
def verify_book_author(title: str, name: str) -> None:
    with Session(get_engine()) as session:
        book = session.scalars(select(BookModel).where(BookModel.title == title)).one()
        assert book.author is not None
        assert book.author.name == name


@then(parsers.parse('the in-memory persister holds {count:d} objects'))
def verify_in_memory_persister(count: int) -> None:
    assert len(container.in_memory_persister().objects) == count
