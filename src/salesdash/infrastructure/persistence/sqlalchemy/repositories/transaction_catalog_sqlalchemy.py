"""SQLAlchemy implementation of TransactionCatalog."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

from sqlalchemy import Select, extract, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from salesdash.domain.catalog.entities import ProductTransaction
from salesdash.domain.catalog.repositories import (
    CategoryCountRow,
    TransactionCatalog,
)
from salesdash.domain.catalog.value_objects import TransactionFilter
from salesdash.domain.shared.time import ensure_utc
from salesdash.infrastructure.persistence.sqlalchemy.models import (
    ProductTransactionModel,
)

logger = logging.getLogger(__name__)

_CENT = Decimal("0.01")


class SqlAlchemyTransactionCatalog(TransactionCatalog):
    """Catalog backed by the ``product_transactions`` table.

    Each operation opens its own session from the session maker, so
    independent reads may be awaited concurrently (e.g. with
    ``asyncio.gather``).
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker

    async def find(
        self,
        transaction_filter: TransactionFilter,
        *,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[ProductTransaction]:
        stmt = self._apply_filter(
            select(ProductTransactionModel),
            transaction_filter,
        ).order_by(ProductTransactionModel.id)

        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        async with self._session_maker() as session:
            result = await session.execute(stmt)
            models = result.scalars().all()

        return [self._map_to_domain(model) for model in models]

    async def count(self, transaction_filter: TransactionFilter) -> int:
        stmt = self._apply_filter(
            select(func.count(ProductTransactionModel.id)),
            transaction_filter,
        )
        async with self._session_maker() as session:
            result = await session.execute(stmt)
            return int(result.scalar_one())

    async def sum_price(self, transaction_filter: TransactionFilter) -> Decimal:
        stmt = self._apply_filter(
            select(func.coalesce(func.sum(ProductTransactionModel.price), 0)),
            transaction_filter,
        )
        async with self._session_maker() as session:
            result = await session.execute(stmt)
            total = result.scalar_one()

        # SQLite hands back float/int for SUM over NUMERIC
        if isinstance(total, Decimal):
            return total
        return Decimal(str(total)).quantize(_CENT)

    async def count_by_category(
        self,
        transaction_filter: TransactionFilter,
    ) -> list[CategoryCountRow]:
        stmt = (
            self._apply_filter(
                select(
                    ProductTransactionModel.category,
                    func.count(ProductTransactionModel.id),
                ),
                transaction_filter,
            )
            .group_by(ProductTransactionModel.category)
            .order_by(ProductTransactionModel.category)
        )
        async with self._session_maker() as session:
            result = await session.execute(stmt)
            rows = result.all()

        return [CategoryCountRow(category=row[0], count=int(row[1])) for row in rows]

    async def insert_many(self, records: Sequence[ProductTransaction]) -> int:
        if not records:
            return 0

        models = [self._create_model_from_domain(record) for record in records]
        async with self._session_maker() as session:
            session.add_all(models)
            await session.commit()

        logger.info("Inserted %d records into the catalog", len(models))
        return len(models)

    @staticmethod
    def _apply_filter(
        stmt: Select,
        transaction_filter: TransactionFilter,
    ) -> Select:
        model = ProductTransactionModel

        if transaction_filter.month is not None:
            stmt = stmt.where(
                extract("month", model.date_of_sale) == transaction_filter.month.index,
            )

        if transaction_filter.search is not None:
            term = transaction_filter.search
            stmt = stmt.where(
                or_(
                    model.title.icontains(term, autoescape=True),
                    model.description.icontains(term, autoescape=True),
                ),
            )

        if transaction_filter.sold is not None:
            stmt = stmt.where(model.sold.is_(transaction_filter.sold))

        price_range = transaction_filter.price_range
        if price_range is not None:
            if price_range.include_minimum:
                stmt = stmt.where(model.price >= price_range.minimum)
            else:
                stmt = stmt.where(model.price > price_range.minimum)
            if price_range.maximum is not None:
                stmt = stmt.where(model.price <= price_range.maximum)

        return stmt

    @staticmethod
    def _create_model_from_domain(record: ProductTransaction) -> ProductTransactionModel:
        return ProductTransactionModel(
            source_id=record.source_id,
            title=record.title,
            description=record.description,
            category=record.category,
            price=record.price,
            image=record.image,
            sold=record.sold,
            date_of_sale=(
                ensure_utc(record.date_of_sale)
                if record.date_of_sale is not None
                else None
            ),
        )

    @staticmethod
    def _map_to_domain(model: ProductTransactionModel) -> ProductTransaction:
        return ProductTransaction(
            source_id=model.source_id,
            title=model.title,
            description=model.description,
            category=model.category,
            price=Decimal(model.price),
            image=model.image,
            sold=model.sold,
            date_of_sale=(
                ensure_utc(model.date_of_sale)
                if model.date_of_sale is not None
                else None
            ),
            catalog_id=model.id,
        )
