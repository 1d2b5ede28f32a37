from collections.abc import Callable, Sequence

from pdfnamer.config.settings import Settings
from pdfnamer.llm.client_base import BaseChatClient
from pdfnamer.llm.factory import ChatClientFactory
from pdfnamer.logging.logger import Log
from pdfnamer.naming.date_resolver import DateResolver
from pdfnamer.naming.filename_synthesizer import FilenameSynthesizer
from pdfnamer.naming.summarizer import Summarizer
from pdfnamer.pdf.factory import PdfExtractorFactory
from pdfnamer.processor.exceptions import ProcessorError
from pdfnamer.processor.models import Document
from pdfnamer.processor.pipeline import PipelineContext, PipelineStep
from pdfnamer.processor.steps import (
    ExtractTextStep,
    ResolveDateStep,
    SummarizeStep,
    SynthesizeFilenameStep,
)

ProgressCallback = Callable[[float], None]


class Processor:
    """Runs the naming pipeline for a single document.

    Pipeline: extract -> resolve date -> summarize -> synthesize filename.
    Steps run strictly in order; the first exception aborts the rest and
    propagates to the caller untouched.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(
        self,
        document: Document,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        """Return the generated filename for *document*.

        ``on_progress`` receives each step's checkpoint after it completes.
        """
        Log.info(f"Processing {document.location}", document_id=document.id)
        context = PipelineContext(document_id=document.id, location=document.location)
        for step in self._steps:
            context = step.run(context)
            if on_progress is not None:
                on_progress(step.progress)

        if context.generated_filename is None:
            raise ProcessorError("Pipeline finished without producing a filename")
        return context.generated_filename


def build_processor(
    settings: Settings,
    client: BaseChatClient | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    if client is None:
        client = ChatClientFactory.create(settings)
    model = settings.llm_model_name
    steps: list[PipelineStep] = [
        ExtractTextStep(PdfExtractorFactory.create(settings)),
        ResolveDateStep(DateResolver(client=client, model=model)),
        SummarizeStep(Summarizer(client=client, model=model)),
        SynthesizeFilenameStep(FilenameSynthesizer(client=client, model=model)),
    ]
    return Processor(steps)
