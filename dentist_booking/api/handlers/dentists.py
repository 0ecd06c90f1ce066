"""
Dentist catalog and comparison endpoints.
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...core.enums import ALL_EXPERTISE, PriceSort
from ...services.backend import BackendClient
from ...services.dentist import ComparisonView, DentistCatalogPipeline
from ..dependencies import get_backend_client


class DentistHandler:
    """Handler for the dentist catalog."""

    def __init__(self):
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Setup catalog routes."""

        @self.router.get("")
        async def list_dentists(
            search: Optional[str] = None,
            expertise: str = ALL_EXPERTISE,
            sort: PriceSort = PriceSort.NONE,
            client: BackendClient = Depends(get_backend_client),
        ):
            """Filtered and sorted dentist catalog."""
            result = await client.get_dentists()
            if not result.is_ok:
                raise HTTPException(
                    status_code=status.HTTP_502_BAD_GATEWAY,
                    detail="Failed to fetch dentists",
                )

            catalog = DentistCatalogPipeline(result.value)
            catalog.set_search(search)
            catalog.set_expertise(expertise)
            catalog.set_price_sort(sort)
            return {
                "dentists": [d.model_dump(mode="json") for d in catalog.view()],
                "expertise_options": catalog.expertise_options(),
            }

        @self.router.get("/compare")
        async def compare_dentists(
            ids: Optional[str] = Query(default=None),
            client: BackendClient = Depends(get_backend_client),
        ):
            """Two dentists side by side."""
            view = ComparisonView(client)
            await view.load(ids)
            summary = view.summary()
            return {
                "state": view.state,
                "error": view.error,
                "summary": summary.model_dump(mode="json") if summary else None,
            }
