"""FastAPI entrypoint: query text in, structured result out."""

from __future__ import annotations

import logging
import os
from dataclasses import asdict
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from contract_nlp.config import PipelineConfig
from contract_nlp.obs.tracing import QueryTraceStore
from contract_nlp.pipeline import QueryPipeline

logging.basicConfig(level=os.getenv("CONTRACT_NLP_LOG_LEVEL", "INFO").upper())


class QueryRequest(BaseModel):
    text: str | None = None


app = FastAPI(title="Contract NLP", version="0.1.0")

_config = PipelineConfig()
_trace_store = QueryTraceStore(capacity=_config.trace_capacity)
_pipeline = QueryPipeline(_config, trace_store=_trace_store)


@app.get("/health")
def health() -> dict[str, Any]:
    return {"status": "ok", "trace_count": len(_trace_store)}


@app.post("/query")
def query(request: QueryRequest) -> dict[str, Any]:
    return _pipeline.process(request.text).to_dict()


@app.post("/intent")
def intent(request: QueryRequest) -> dict[str, Any]:
    return asdict(_pipeline.classify_intent(request.text))


@app.get("/traces")
def traces(limit: int = 20) -> dict[str, Any]:
    return {"items": [asdict(record) for record in _trace_store.list_recent(limit=limit)]}


@app.get("/traces/{trace_id}")
def trace_detail(trace_id: str) -> dict[str, Any]:
    try:
        record = _trace_store.get(trace_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return asdict(record)


@app.get("/metrics")
def metrics() -> dict[str, Any]:
    return _trace_store.summary()
