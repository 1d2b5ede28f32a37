from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import ClassVar


@dataclass(slots=True)
class PipelineContext:
    document_id: str
    location: Path
    extracted_text: str = ""
    resolved_date: date | None = None
    summary: str = ""
    generated_filename: str | None = None


class PipelineStep(ABC):
    """One stage of the naming pipeline.

    ``progress`` is the fraction reported once the stage has finished.
    """

    progress: ClassVar[float]

    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
