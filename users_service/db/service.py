from asyncpg import Pool
from pydantic import BaseModel, ConfigDict

from users_service.log import app_logger


class DBService(BaseModel):
    pool: Pool

    model_config = ConfigDict(arbitrary_types_allowed=True)

    async def setup(self) -> None:
        await self.pool
        app_logger.info("Db service initialized")

    async def cleanup(self) -> None:
        await self.pool.close()
        app_logger.info("Db service shutdown")

    async def ping(self) -> bool:
        return await self.pool.fetchval("SELECT TRUE")
