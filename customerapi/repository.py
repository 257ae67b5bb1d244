"""SQL storage for customers."""

from __future__ import annotations

import dataclasses
from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, Integer, String, create_engine, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from customerapi.domain import Customer, CustomerRepository
from customerapi.pagination import Pagination, Params

_ID_TYPE = BigInteger().with_variant(Integer(), "sqlite")


class _Base(DeclarativeBase):
    pass


class CustomerModel(_Base):
    """Row of the ``customers`` table."""

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(_ID_TYPE, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    first_name: Mapped[str] = mapped_column(String, default="")
    last_name: Mapped[str] = mapped_column(String, default="")
    phone: Mapped[str] = mapped_column(String, default="")

    def to_entity(self) -> Customer:
        """Map the row to a customer entity."""
        return Customer(
            id=self.id or 0,
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone,
        )

    @classmethod
    def from_entity(cls, customer: Customer) -> CustomerModel:
        """Build a row from a customer entity; an id of 0 means a new row."""
        return cls(
            id=customer.id or None,
            first_name=customer.first_name,
            last_name=customer.last_name,
            phone=customer.phone,
        )


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SqlCustomerRepository(CustomerRepository):
    """Customer repository backed by a SQLAlchemy engine."""

    def __init__(self, engine: Engine):
        self._engine = engine

    def save(self, customer: Customer) -> None:
        """Insert a new customer or update a stored one; sets ``customer.id``."""
        now = _now()
        with Session(self._engine) as session, session.begin():
            model = session.get(CustomerModel, customer.id) if customer.id else None
            if model is None:
                model = CustomerModel.from_entity(customer)
                model.created_at = now
                session.add(model)
            else:
                model.first_name = customer.first_name
                model.last_name = customer.last_name
                model.phone = customer.phone
            model.updated_at = now
            session.flush()
            customer.id = model.id

    def list(self, params: Params) -> Pagination[Customer]:
        """Return one page of customers that are not deleted."""
        params = dataclasses.replace(params)
        params.normalize()
        result: Pagination[Customer] = Pagination(page=params.page, limit=params.limit)
        active = CustomerModel.deleted_at.is_(None)
        with Session(self._engine) as session:
            count = select(func.count()).select_from(CustomerModel).where(active)
            result.total = session.scalar(count) or 0
            result.set_total_pages()
            rows = session.scalars(
                select(CustomerModel)
                .where(active)
                .order_by(CustomerModel.id)
                .limit(params.limit)
                .offset(params.calculate_offset())
            )
            result.data = [row.to_entity() for row in rows]
        return result


def build_dsn(host: str, port: str, db_name: str, user: str, password: str, ssl_mode: str) -> str:
    """Return a key/value PostgreSQL connection string."""
    return (
        f"host={host} port={port} dbname={db_name} "
        f"user={user} password={password} sslmode={ssl_mode}"
    )


def connect(url) -> Engine:
    """Open an engine for ``url`` and make sure the tables exist."""
    engine = create_engine(url)
    _Base.metadata.create_all(engine)
    return engine


def close(engine: Engine) -> None:
    """Release every connection held by the engine."""
    engine.dispose()