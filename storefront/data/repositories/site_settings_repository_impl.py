"""SQLAlchemy implementation of SiteSettingsRepository."""

from datetime import datetime, timezone
from typing import Dict

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.repositories import SiteSettingsRepository

from ..errors import data_access
from ..models import SiteSettingModel


class SqlAlchemySiteSettingsRepository(SiteSettingsRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_all(self) -> Dict[str, str]:
        async with data_access("read site settings"):
            result = await self._session.execute(
                select(SiteSettingModel).order_by(SiteSettingModel.id)
            )
            rows = result.scalars().all()

        return {row.id: row.value for row in rows}

    async def update(self, key: str, value: str) -> bool:
        stmt = (
            update(SiteSettingModel)
            .where(SiteSettingModel.id == key)
            .values(value=value, updated_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        async with data_access("update site setting"):
            result = await self._session.execute(stmt)

        return result.rowcount > 0

    async def upsert_many(self, values: Dict[str, str]) -> None:
        now = datetime.now(timezone.utc)
        async with data_access("upsert site settings"):
            for key, value in values.items():
                existing = await self._session.get(SiteSettingModel, key)
                if existing is None:
                    self._session.add(
                        SiteSettingModel(id=key, value=value, type="string", updated_at=now)
                    )
                else:
                    existing.value = value
                    existing.updated_at = now
            await self._session.flush()
