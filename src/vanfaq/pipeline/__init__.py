"""FAQ answering pipeline — ingest, synthesize, service facade."""

from vanfaq.pipeline.ingest import IngestPipeline
from vanfaq.pipeline.schemas import FAQAnswer, IngestResult, SourceRef
from vanfaq.pipeline.service import FAQService, ServiceState
from vanfaq.pipeline.synthesizer import AnswerSynthesizer

__all__ = [
    "AnswerSynthesizer",
    "FAQAnswer",
    "FAQService",
    "IngestPipeline",
    "IngestResult",
    "ServiceState",
    "SourceRef",
]
