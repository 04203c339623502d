"""Shared pytest fixtures for campus-eats tests."""

import os

# plain output so assertions can match console text
os.environ["NO_COLOR"] = "1"
os.environ.pop("FORCE_COLOR", None)

import pytest

from campus_eats import (
    DatabaseManager,
    MenuDAO,
    MenuManager,
    Session,
    User,
    UserDAO,
    UserManager,
)


@pytest.fixture
def db():
    """In-memory database with the seeded restaurants and starter menu."""
    database = DatabaseManager(":memory:")
    yield database
    database.close()


@pytest.fixture
def menu_dao(db: DatabaseManager) -> MenuDAO:
    return MenuDAO(db)


@pytest.fixture
def user_dao(db: DatabaseManager) -> UserDAO:
    return UserDAO(db)


@pytest.fixture
def menu_manager(menu_dao: MenuDAO) -> MenuManager:
    return MenuManager(menu_dao)


@pytest.fixture
def user_manager(user_dao: UserDAO) -> UserManager:
    return UserManager(user_dao)


@pytest.fixture
def session() -> Session:
    return Session()


@pytest.fixture
def student() -> User:
    """Fixture providing a standard student account."""
    return User("hana", "pw1234", "Hana Kim", 2024123, "hana@campus.ac.kr", "Dormitory A")


@pytest.fixture
def stored_student(user_dao: UserDAO, student: User) -> User:
    """The standard student, already inserted."""
    assert user_dao.add(student).ok
    return student


@pytest.fixture
def console(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Queue of answers handed to input(); an unexpected prompt fails the test."""
    answers: list[str] = []

    def fake_input(prompt: str = "") -> str:
        if not answers:
            raise AssertionError(f"unexpected prompt: {prompt!r}")
        return answers.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)
    return answers
