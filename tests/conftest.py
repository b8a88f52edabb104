from __future__ import annotations

from collections.abc import Generator
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from wallet_splits.api.app import create_app
from wallet_splits.db.base import Base, import_orm_models
from wallet_splits.db.models import (
    Group,
    GroupMember,
    Payment,
    Split,
    SplitMember,
    User,
)
from wallet_splits.db.session import get_db_session
from wallet_splits.domain.records import PaymentStatus, SplitStatus


@pytest.fixture
def sqlite_session_factory() -> Generator[sessionmaker[Session], None, None]:
    import_orm_models()
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(
        bind=engine,
        class_=Session,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
    )
    try:
        yield factory
    finally:
        Base.metadata.drop_all(engine)


@pytest.fixture
def client(
    sqlite_session_factory: sessionmaker[Session],
) -> Generator[TestClient, None, None]:
    app = create_app()

    def override_get_db_session() -> Generator[Session, None, None]:
        with sqlite_session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    with TestClient(app) as test_client:
        yield test_client


def _seed_ledger(session: Session) -> None:
    users = {
        name: User(id=f"user-{name}", wallet_address=f"0x{name * 3}")
        for name in ("a", "b", "c", "u", "v")
    }
    session.add_all(users.values())
    session.add_all(
        [
            Group(id="g1", name="Trip", creator_id="user-a"),
            Group(id="g2", name="Lunch", creator_id="user-u"),
            Group(id="g3", name="Rent", creator_id="user-v"),
        ]
    )
    session.add_all(
        [
            GroupMember(group_id=group_id, user_id=f"user-{name}")
            for group_id, names in (("g1", "abc"), ("g2", "uv"), ("g3", "uv"))
            for name in names
        ]
    )
    session.add_all(
        [
            Split(
                id="s1",
                group_id="g1",
                creator_id="user-a",
                title="Dinner",
                total_amount=Decimal("3.00"),
                paid_by="0xAAA",
            ),
            Split(
                id="s2",
                group_id="g2",
                creator_id="user-v",
                title="Lunch",
                total_amount=Decimal("1.00"),
                paid_by="0xvvv",
            ),
            Split(
                id="s3",
                group_id="g3",
                creator_id="user-u",
                title="Rent",
                total_amount=Decimal("1.60"),
                paid_by="0xuuu",
            ),
            Split(
                id="s4",
                group_id="g3",
                creator_id="user-u",
                title="Old bill",
                total_amount=Decimal("9.00"),
                paid_by="0xuuu",
                status=SplitStatus.SETTLED,
            ),
        ]
    )
    session.add_all(
        [
            SplitMember(split_id="s1", user_id="user-a", amount=Decimal("1.00")),
            SplitMember(split_id="s1", user_id="user-b", amount=Decimal("1.00")),
            SplitMember(split_id="s1", user_id="user-c", amount=Decimal("1.00")),
            SplitMember(split_id="s2", user_id="user-u", amount=Decimal("0.50")),
            SplitMember(split_id="s2", user_id="user-v", amount=Decimal("0.50")),
            SplitMember(split_id="s3", user_id="user-u", amount=Decimal("0.80")),
            SplitMember(split_id="s3", user_id="user-v", amount=Decimal("0.80")),
            SplitMember(split_id="s4", user_id="user-v", amount=Decimal("9.00")),
        ]
    )
    session.add_all(
        [
            Payment(
                id="p1",
                split_id="s1",
                from_user_id="user-b",
                amount=Decimal("0.60"),
            ),
            Payment(
                id="p2",
                split_id="s1",
                from_user_id="user-c",
                amount=Decimal("0.50"),
                status=PaymentStatus.FAILED,
            ),
        ]
    )
    session.commit()


@pytest.fixture
def seeded_session_factory(
    sqlite_session_factory: sessionmaker[Session],
) -> sessionmaker[Session]:
    """Ledger with a three-way trip and two U/V groups with offsetting debts.

    Amounts in minor units: g1 A paid 300 split A/B/C, B paid 60 back
    (C's 50 failed). g2 U owes V 50. g3 V owes U 80.
    """
    with sqlite_session_factory() as session:
        _seed_ledger(session)
    return sqlite_session_factory
