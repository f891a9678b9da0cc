"""
Homepage router
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError
from config.seed_data import EMPLOYEES, NEWS, COMPANY_NAME, SITE_VERSION
from src.api.dependencies import get_chat_service, get_templates
from src.models.site import Employee, NewsItem
from src.services.chat_service import ChatService
from src.utils.exceptions import TemplateRenderError


router = APIRouter(tags=["home"])

INDEX_TEMPLATE = "index.html"

_employees = [Employee(**item) for item in EMPLOYEES]
_news = [NewsItem(**item) for item in NEWS]


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home(
    request: Request,
    templates: Jinja2Templates = Depends(get_templates),
    service: ChatService = Depends(get_chat_service)
):
    """Render the homepage"""
    with service.state.locked() as state:
        offices = state.directory.list_offices()

    context = {
        "employees": [employee.model_dump() for employee in _employees],
        "news": [item.model_dump() for item in _news],
        "offices": [office.model_dump() for office in offices],
        "version": SITE_VERSION,
        "company": COMPANY_NAME,
        "chat_enabled": service.enabled,
    }

    try:
        return templates.TemplateResponse(request, INDEX_TEMPLATE, context)
    except TemplateError as e:
        raise TemplateRenderError(INDEX_TEMPLATE, str(e)) from e
