"""Company, brand and site lookups."""

from __future__ import annotations

from typing import Any, AsyncIterator, Optional

from ..contracts import PageCursor, PageResult, RequestDescriptor
from ..pagination import PARTNER_SITES
from .base import Resource


class SitesResource(Resource):
    async def get_company_sites(self) -> Any:
        """Active sites of the client's company."""
        return await self._client.request(
            RequestDescriptor.build("GET", f"/Company/{self.company_uid}/Sites")
        )

    async def get_site(self, site_uid: str) -> Any:
        return await self._client.request(RequestDescriptor.build("GET", f"/Site/{site_uid}"))

    async def get_brands(self) -> Any:
        """Brands (concepts) of the client's company."""
        return await self._client.request(
            RequestDescriptor.build("GET", f"/Companies/{self.company_uid}/Brands")
        )

    async def get_customer_site_id_map(self, only_active_sites: bool = False) -> Any:
        """SiteUID to CustomerSiteID mapping for every site of the company."""
        params = {"getOnlyActiveSites": True} if only_active_sites else None
        return await self._client.request(
            RequestDescriptor.build(
                "GET", f"/Companies/{self.company_uid}/Sites/CustomerSiteIdMap", params
            )
        )

    async def get_operating_info(self, site_uid: str) -> Any:
        return await self._client.request(
            RequestDescriptor.build("GET", f"/Site/{site_uid}/operatingInfo")
        )

    async def get_partner_sites(self, token: Optional[str] = None) -> PageResult[Any]:
        """One page of the sites associated with the partner API key.

        Pass the cutoff of the previous page as ``token`` to continue.
        """
        return await self._client.get_page(
            PARTNER_SITES, "/Site/Sites", PageCursor(window_start=token)
        )

    def iter_partner_sites(self, num_sites: int = 0) -> AsyncIterator[Any]:
        """Yield partner sites, one per page; ``num_sites`` of ``0`` means all."""
        return self._client.iter_items(
            PARTNER_SITES, "/Site/Sites", PageCursor.create(page_limit=num_sites)
        )
