"""Catalogue endpoints: services, case studies and business profiles."""

from fastapi import APIRouter, status

from lfdigital.api.dependencies import StoreDep
from lfdigital.catalog.models import BusinessInfo, BusinessInfoCreate, CaseStudy, Service
from lfdigital.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api")


@router.get("/services", response_model=list[Service])
async def list_services(store: StoreDep) -> list[Service]:
    return await store.list_services()


@router.get("/services/category/{category}", response_model=list[Service])
async def list_services_by_category(category: str, store: StoreDep) -> list[Service]:
    return await store.list_services_by_category(category)


@router.get("/case-studies", response_model=list[CaseStudy])
async def list_case_studies(store: StoreDep) -> list[CaseStudy]:
    return await store.list_case_studies()


@router.get("/case-studies/industry/{industry}", response_model=list[CaseStudy])
async def list_case_studies_by_industry(industry: str, store: StoreDep) -> list[CaseStudy]:
    return await store.list_case_studies_by_industry(industry)


@router.post(
    "/business-info",
    status_code=status.HTTP_201_CREATED,
    response_model=BusinessInfo,
)
async def create_business_info(body: BusinessInfoCreate, store: StoreDep) -> BusinessInfo:
    """Store a visitor's business profile."""
    info = await store.create_business_info(body)
    logger.info("business_info_created", business_info_id=info.id, industry=info.industry)
    return info
