"""PostgreSQL implementation of OneTimeCode repository."""

from typing import List

from sqlalchemy import delete, desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from debatify.domain.model import OneTimeCode
from debatify.domain.repository import OneTimeCodeRepository
from debatify.persistence.mappers import one_time_code_to_dict, row_to_one_time_code
from debatify.persistence.tables import one_time_codes_table


class PostgresOneTimeCodeRepository(OneTimeCodeRepository):
    """PostgreSQL implementation of OneTimeCodeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, code: OneTimeCode) -> OneTimeCode:
        await self.session.execute(
            insert(one_time_codes_table).values(**one_time_code_to_dict(code))
        )
        await self.session.flush()
        return code

    async def find_by_email(self, email: str) -> List[OneTimeCode]:
        stmt = (
            select(one_time_codes_table)
            .where(one_time_codes_table.c.email == email)
            .order_by(desc(one_time_codes_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_one_time_code(row._asdict()) for row in result.fetchall()]

    async def delete_by_email(self, email: str) -> int:
        result = await self.session.execute(
            delete(one_time_codes_table).where(one_time_codes_table.c.email == email)
        )
        return result.rowcount or 0
