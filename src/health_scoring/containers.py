"""Dependency container wiring for the application."""

from dataclasses import dataclass

from health_scoring.config import Settings
from health_scoring.services.reports import HealthReportService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    report_service: HealthReportService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    report_service = HealthReportService(
        timezone_name=resolved_settings.timezone,
        default_window_days=resolved_settings.default_window_days,
        consistency_window_days=resolved_settings.consistency_window_days,
    )
    return AppContainer(settings=resolved_settings, report_service=report_service)
