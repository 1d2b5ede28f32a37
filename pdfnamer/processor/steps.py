from typing import ClassVar

from pdfnamer.logging.logger import Log
from pdfnamer.naming.date_resolver import DateResolver
from pdfnamer.naming.filename_synthesizer import FilenameSynthesizer
from pdfnamer.naming.summarizer import Summarizer
from pdfnamer.pdf.base import BasePdfExtractor
from pdfnamer.processor.pipeline import PipelineContext, PipelineStep


class ExtractTextStep(PipelineStep):
    progress: ClassVar[float] = 0.25

    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted_text = self._pdf_extractor.extract_file(context.location)
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from {context.location.name}",
            document_id=context.document_id,
        )
        return context


class ResolveDateStep(PipelineStep):
    progress: ClassVar[float] = 0.5

    def __init__(self, date_resolver: DateResolver) -> None:
        self._date_resolver = date_resolver

    def run(self, context: PipelineContext) -> PipelineContext:
        context.resolved_date = self._date_resolver.resolve_date(context.extracted_text)
        Log.info(
            f"Resolved date: {context.resolved_date or 'none'}",
            document_id=context.document_id,
        )
        return context


class SummarizeStep(PipelineStep):
    progress: ClassVar[float] = 0.75

    def __init__(self, summarizer: Summarizer) -> None:
        self._summarizer = summarizer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.summary = self._summarizer.summarize(context.extracted_text)
        Log.info(
            f"Summarized into {len(context.summary.split())} words",
            document_id=context.document_id,
        )
        return context


class SynthesizeFilenameStep(PipelineStep):
    progress: ClassVar[float] = 1.0

    def __init__(self, filename_synthesizer: FilenameSynthesizer) -> None:
        self._filename_synthesizer = filename_synthesizer

    def run(self, context: PipelineContext) -> PipelineContext:
        extension = context.location.suffix.lstrip(".") or None
        context.generated_filename = self._filename_synthesizer.synthesize(
            context.summary,
            context.resolved_date,
            extension,
        )
        Log.info(
            f"Generated filename {context.generated_filename!r}",
            document_id=context.document_id,
        )
        return context
