"""Action dispatch API routes."""

from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from coding_specialist.config import AppConfig
from coding_specialist.domain.dispatcher import Dispatcher
from coding_specialist.domain.models import ACTIONS, ActionType, Report
from coding_specialist.infrastructure.delay import ProcessingDelay

api_router = APIRouter(prefix="/api", tags=["Actions"])

dispatcher = Dispatcher(delay=ProcessingDelay.from_config(AppConfig.from_env()))


class ActionInfoResponse(BaseModel):
    type: ActionType
    label: str
    description: str


class ActionListResponse(BaseModel):
    actions: List[ActionInfoResponse]


class DispatchRequest(BaseModel):
    action: ActionType
    code: str = ""
    prompt: str = ""


class ReportResponse(BaseModel):
    type: ActionType
    result: str
    timestamp: str

    @classmethod
    def from_report(cls, report: Report) -> "ReportResponse":
        return cls(**report.to_dict())


class CurrentReportResponse(BaseModel):
    report: Optional[ReportResponse] = None
    processing: bool = False


@api_router.get("/actions", response_model=ActionListResponse)
async def list_actions():
    return ActionListResponse(
        actions=[
            ActionInfoResponse(type=info.action, label=info.label, description=info.description)
            for info in ACTIONS
        ]
    )


@api_router.post("/dispatch", response_model=ReportResponse)
async def dispatch(req: DispatchRequest):
    report = await dispatcher.dispatch(req.action, code=req.code, prompt=req.prompt)
    return ReportResponse.from_report(report)


@api_router.get("/report", response_model=CurrentReportResponse)
async def current_report():
    """Last published report, if any."""
    current = dispatcher.current
    return CurrentReportResponse(
        report=ReportResponse.from_report(current) if current else None,
        processing=dispatcher.is_processing,
    )
