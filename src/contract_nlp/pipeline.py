"""End-to-end query understanding pipeline."""

from __future__ import annotations

import logging

from contract_nlp.assembler import ResponseAssembler
from contract_nlp.config import PipelineConfig
from contract_nlp.extract.entities import EntityExtractor
from contract_nlp.obs.tracing import QueryTraceStore, Timer
from contract_nlp.routing.intent import IntentClassifier
from contract_nlp.routing.router import Router
from contract_nlp.routing.validator import Validator
from contract_nlp.schema import MISSING_HEADER, PROCESSING_ERROR, QueryResult
from contract_nlp.text.spelling import SpellCorrector
from contract_nlp.text.tokenizer import Tokenizer
from contract_nlp.types import CorrectionResult, IntentDecision

logger = logging.getLogger(__name__)

EMPTY_QUERY_MESSAGE = "Query is empty. Provide a contract, part or customer identifier or a filter"


class QueryPipeline:
    """Runs spell correction, tokenization, extraction, validation and routing.

    Stages share no state across calls, so one pipeline instance can serve
    concurrent callers. Internal failures never escape :meth:`process`; they
    come back as a result with a single ``PROCESSING_ERROR``.
    """

    def __init__(
        self,
        config: PipelineConfig | None = None,
        *,
        trace_store: QueryTraceStore | None = None,
    ) -> None:
        self.config = config or PipelineConfig()
        self.trace_store = trace_store
        self.corrector = SpellCorrector()
        self.tokenizer = Tokenizer()
        self.extractor = EntityExtractor(
            self.config.identifiers, source=self.config.entity_source
        )
        self.validator = Validator()
        self.router = Router()
        self.intent_classifier = IntentClassifier()
        self.assembler = ResponseAssembler()

    def process(self, text: str | None) -> QueryResult:
        original = text or ""
        correction = CorrectionResult(original_text=original, corrected_text=None, confidence=0.0)
        with Timer() as timer:
            try:
                if original.strip():
                    correction = self._correct(original)
                result = self._run(correction)
            except Exception as exc:
                logger.exception("query processing failed for %r", original)
                result = self.assembler.error_result(
                    original,
                    PROCESSING_ERROR,
                    f"Processing failed: {exc}",
                    correction=correction,
                )
            result.query_metadata.processing_time_ms = timer.current_ms()

        if self.trace_store is not None:
            self.trace_store.record(result)
        return result

    def classify_intent(self, text: str | None) -> IntentDecision:
        return self.intent_classifier.classify(self._correct(text or ""))

    def _run(self, correction: CorrectionResult) -> QueryResult:
        original = correction.original_text
        if not original.strip():
            return self.assembler.error_result(original, MISSING_HEADER, EMPTY_QUERY_MESSAGE)

        text = correction.effective_text

        tokens = self.tokenizer.tokenize(text)
        logger.debug("tokens: %s", tokens)

        analysis = self.extractor.extract_header(text, tokens)
        entities = self.extractor.extract_filters(text)
        logger.debug("header: %s issues: %s entities: %s", analysis.header, analysis.issues, entities)

        errors = self.validator.validate(analysis, entities, text)
        metadata = self.router.route(analysis.header, entities, errors)
        return self.assembler.assemble(correction, analysis.header, metadata, entities, errors)

    def _correct(self, original: str) -> CorrectionResult:
        if not self.config.spell_correction:
            return CorrectionResult(original_text=original, corrected_text=None, confidence=0.0)
        return self.corrector.correct(original)
