"""
Side-by-side comparison of two dentists.
"""

import asyncio
from typing import List, Optional
from pydantic import BaseModel, ConfigDict

from ...core.models import Dentist
from ...utils.effects import EffectScope, ScopedFlow
from ...utils.logging import get_logger
from ..backend import BackendClient

logger = get_logger("dentist.compare")


class ComparisonSummary(BaseModel):
    """Two dentists plus which column wins on price and on experience."""

    model_config = ConfigDict(extra="forbid")

    dentists: List[Dentist]
    cheaper: int
    more_experienced: int


class ComparisonView(ScopedFlow):
    """Fetch the compared dentists concurrently and summarise them."""

    ERROR_MESSAGE = "Failed to load comparison data."

    def __init__(self, client: BackendClient, scope: Optional[EffectScope] = None):
        super().__init__(scope, name="compare")
        self.client = client
        self.dentists: List[Dentist] = []
        self.error: Optional[str] = None

    @staticmethod
    def parse_ids(ids_param: Optional[str]) -> List[str]:
        if not ids_param:
            return []
        return [part.strip() for part in ids_param.split(",") if part.strip()]

    async def _fetch_all(self, ids: List[str]) -> list:
        return await asyncio.gather(*(self.client.get_dentist(did) for did in ids))

    async def load(self, ids_param: Optional[str]) -> None:
        ids = self.parse_ids(ids_param)
        if not ids:
            return

        results = await self._call(self._fetch_all(ids))
        if results is None:
            return

        failed = [r for r in results if not r.is_ok]
        if failed:
            logger.error(f"compare: {len(failed)} of {len(ids)} dentist fetches failed")
            self.error = self.ERROR_MESSAGE
            return
        self.dentists = [r.value for r in results]

    @property
    def state(self) -> str:
        """One of error, loading (fewer than two records) or ready."""
        if self.error:
            return "error"
        if len(self.dentists) < 2:
            return "loading"
        return "ready"

    def summary(self) -> Optional[ComparisonSummary]:
        if self.state != "ready":
            return None
        first, second = self.dentists[0], self.dentists[1]
        return ComparisonSummary(
            dentists=[first, second],
            cheaper=0 if first.starting_price < second.starting_price else 1,
            more_experienced=0 if first.year_experience > second.year_experience else 1,
        )
