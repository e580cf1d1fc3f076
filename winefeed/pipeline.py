import logging
from abc import ABC, abstractmethod
from typing import Any

from .settings import FeedConfig

logger = logging.getLogger(__name__)


class DataPipeline(ABC):
    """
    Abstract base class for export pipelines.
    Follows an Extract -> Transform -> Load (ETL) pattern. Nothing is caught
    here: any failure aborts the run before the output file is touched.
    """

    def __init__(self, report_type: str, config: FeedConfig):
        self.report_type = report_type
        self.config = config

    def run(self) -> int:
        """
        Orchestrates the pipeline execution and returns the number of rows written.
        """
        logger.info(f"🚀 STEP: {self.report_type.upper()} EXPORT")
        logger.info("-" * 30)

        # --- 1. EXTRACT ---
        raw_data = self.extract()

        # --- 2. TRANSFORM ---
        validated_data = self.transform(raw_data)

        # --- 3. LOAD ---
        written = self.load(validated_data)

        logger.info(f"✅ {self.report_type.capitalize()} Pipeline Finished.")
        logger.info("=" * 60)
        return written

    @abstractmethod
    def extract(self) -> Any:
        """
        Responsible for calling the remote sources and returning the raw joined data.
        """
        pass

    @abstractmethod
    def transform(self, data: Any) -> list[Any]:
        """
        Responsible for deriving fields and validation.
        Returns a list of validated Pydantic models.
        """
        pass

    @abstractmethod
    def load(self, validated_data: list[Any]) -> int:
        """
        Persists the validated rows and returns how many were written.
        """
        pass
