"""Factories for size advisor dependencies."""

from src.services.size_service.advisor import SizeAdvisor


class SizeService:
    """Expose dependency providers for size selection and validation.

    Keeps FastAPI dependency wiring concise and centralized.
    """

    @staticmethod
    def get_size_advisor() -> SizeAdvisor:
        """Provide the SizeAdvisor for API handlers."""
        return SizeAdvisor()
