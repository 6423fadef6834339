import pytest
from app.models.user import User
from app.uow import (
    SQLAlchemyReadOnlyUnitOfWork as ROuow,
)
from app.uow import (
    SQLAlchemyUnitOfWork as RWuow,
)
from tests.factories.user import UserFactory


class TestSQLAlchemyReadOnlyUnitOfWork:
    def test_blocks_orm_flush_writes(self, app, db, session):
        """
        Ensure that attempting to flush ORM changes inside the RO UoW raises.
        """
        with ROuow() as uow, pytest.raises(RuntimeError, match="ORM flush blocked"):
            uow.session.add(UserFactory.build())
            uow.session.flush()

    def test_allows_reads(self, app, db, session):
        """
        Read operations should work normally within RO UoW.
        """
        with RWuow() as uow:
            uow.users.add(UserFactory.build(email="reader@example.com"))

        with ROuow() as uow:
            assert uow.users.exists_by_email("reader@example.com")

    def test_disallows_commit(self, app, db, session):
        """
        RO UoW must reject commit() by design.
        """
        with ROuow() as uow, pytest.raises(RuntimeError, match="does not allow commit"):
            uow.commit()

    def test_mutation_attempt_does_not_persist(self, app, db, session):
        """
        Any attempted modifications must not persist after RO UoW exits.
        """
        with RWuow() as uow:
            user = uow.users.add(UserFactory.build(first_name="Before"))
            user_id = user.id

        with ROuow() as uow, pytest.raises(RuntimeError, match="ORM flush blocked"):
            u = uow.session.get(User, user_id)
            u.first_name = "After"
            uow.session.flush()

        assert session.get(User, user_id).first_name == "Before"
