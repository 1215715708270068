"""Analytics API endpoints with simple token auth."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from calorie_vita.api.schemas import GoalsPayload  # noqa: TC001

if TYPE_CHECKING:
    from calorie_vita.containers import AppContainer

router = APIRouter(prefix="/users/{user_id}", tags=["analytics"])


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/bmi", dependencies=[Depends(require_api_token)])
async def bmi(user_id: UUID, request: Request) -> dict[str, object]:
    """Return BMI, category and recommendation."""
    container: AppContainer = request.app.state.container
    report = container.analytics_service.get_bmi(user_id)
    return {
        "bmi": round(report.result.bmi, 1),
        "category": report.result.category,
        "severity": report.result.severity,
        "color": report.result.color,
        "recommendation": report.recommendation,
    }


@router.get("/weight-progress", dependencies=[Depends(require_api_token)])
async def weight_progress(user_id: UUID, request: Request) -> dict[str, object]:
    """Return progress towards the goal weight."""
    container: AppContainer = request.app.state.container
    result = container.analytics_service.get_weight_progress(user_id)
    return {**asdict(result), "goal_set": result.goal_set}


@router.get("/macros", dependencies=[Depends(require_api_token)])
async def macros(
    user_id: UUID, request: Request, day: date | None = None
) -> dict[str, object]:
    """Return macro adherence and balance for a day."""
    container: AppContainer = request.app.state.container
    report = container.analytics_service.get_macro_report(user_id, day)
    return asdict(report)


@router.get("/calorie-targets", dependencies=[Depends(require_api_token)])
async def calorie_targets(
    user_id: UUID, request: Request, day: date | None = None
) -> dict[str, object]:
    """Return remaining calories and guidance for the user's fitness goal."""
    container: AppContainer = request.app.state.container
    targets = container.analytics_service.get_calorie_targets(user_id, day)
    return asdict(targets)


@router.get("/period-changes", dependencies=[Depends(require_api_token)])
async def period_changes(
    user_id: UUID, request: Request, period: str | None = None
) -> dict[str, object]:
    """Return changes between the current and preceding period."""
    container: AppContainer = request.app.state.container
    changes = container.analytics_service.get_period_changes(
        user_id, period or container.settings.default_period
    )
    return asdict(changes)


@router.get("/streaks", dependencies=[Depends(require_api_token)])
async def streaks(user_id: UUID, request: Request) -> dict[str, object]:
    """Return streaks for every daily goal."""
    container: AppContainer = request.app.state.container
    result = container.analytics_service.get_streaks(user_id)
    return {"streaks": {str(key): asdict(value) for key, value in result.items()}}


@router.put("/goals", dependencies=[Depends(require_api_token)])
async def update_goals(
    user_id: UUID, payload: GoalsPayload, request: Request
) -> dict[str, object]:
    """Replace the user's goals."""
    container: AppContainer = request.app.state.container
    stored = container.analytics_service.update_goals(user_id, payload.to_domain())
    return asdict(stored)
