"""FastAPI application factory."""

from dataclasses import asdict

from fastapi import FastAPI, Request

from health_scoring.api.errors import register_exception_handlers
from health_scoring.api.schemas import (
    DailyScoreRequest,
    ItemScoreRequest,
    WindowRequest,
)
from health_scoring.app_logging import configure_logging
from health_scoring.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    app = FastAPI(title="Health Scoring")
    app.state.container = container
    register_exception_handlers(app)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/v1/scores/item")
    async def score_item(body: ItemScoreRequest, request: Request) -> dict[str, int]:
        """Score a single food item."""
        service = _container(request).report_service
        return {"score": service.score_item(body.entry.to_entry())}

    @app.post("/v1/scores/daily")
    async def score_daily(
        body: DailyScoreRequest, request: Request
    ) -> dict[str, object]:
        """Return the comprehensive score for one day."""
        service = _container(request).report_service
        report = service.daily_report(
            [payload.to_entry() for payload in body.food_entries],
            [payload.to_entry() for payload in body.wellness_entries],
            day=body.day,
        )
        return asdict(report)

    @app.post("/v1/scores/history")
    async def score_history(body: WindowRequest, request: Request) -> dict[str, object]:
        """Return average scores over a trailing window."""
        service = _container(request).report_service
        return asdict(service.history(body.foods(), body.wellness(), body.window()))

    @app.post("/v1/scores/trend")
    async def score_trend(body: WindowRequest, request: Request) -> dict[str, object]:
        """Return per-day overall scores over a trailing window."""
        service = _container(request).report_service
        trend = service.trend(body.foods(), body.wellness(), body.window())
        return {"days": [asdict(point) for point in trend]}

    @app.post("/v1/insights/nutrition")
    async def insights_nutrition(
        body: WindowRequest, request: Request
    ) -> dict[str, object]:
        """Return macro averages, sugar status and recommendations."""
        service = _container(request).report_service
        return asdict(service.nutrition_insights(body.foods(), body.window()))

    @app.post("/v1/insights/sugar")
    async def insights_sugar(
        body: WindowRequest, request: Request
    ) -> dict[str, object]:
        """Return daily added sugar against the daily target."""
        service = _container(request).report_service
        return asdict(service.sugar_trend(body.foods(), body.window()))

    @app.post("/v1/insights/wellness")
    async def insights_wellness(
        body: WindowRequest, request: Request
    ) -> dict[str, object]:
        """Return wellness averages and a matching tip."""
        service = _container(request).report_service
        averages, tip = service.wellness_summary(body.wellness(), body.window())
        return {"averages": asdict(averages), "tip": asdict(tip)}

    return app


def _container(request: Request) -> AppContainer:
    return request.app.state.container
