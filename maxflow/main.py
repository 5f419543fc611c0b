import logging
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .algorithms import edmonds_karp
from .config import Settings, configure_logging, load_settings
from .errors import FlowOverflowError, MaxFlowError
from .generators import random_graph
from .models import GraphInput, MaxFlowResponse
from .parsing import decode_input, parse_edge_list

logger = logging.getLogger(__name__)

settings = load_settings()
configure_logging(settings.log_level)

app = FastAPI(title="MaxFlow API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"]
)


def get_settings() -> Settings:
    return settings


@app.exception_handler(MaxFlowError)
def maxflow_error(request: Request, exc: MaxFlowError):
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(FlowOverflowError)
def overflow_error(request: Request, exc: FlowOverflowError):
    logger.error("%s %s aborted: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/api/maxflow", response_model=MaxFlowResponse)
def compute_maxflow(payload: GraphInput, settings: Settings = Depends(get_settings)):
    settings.check_node_count(payload.n)
    edges_tuples = [(e.u, e.v, e.capacity) for e in payload.edges]
    return edmonds_karp(payload.n, edges_tuples, payload.source, payload.sink, settings)


@app.post("/api/maxflow/text", response_model=MaxFlowResponse)
async def compute_maxflow_text(request: Request, source: int = 0, sink: Optional[int] = None,
                               settings: Settings = Depends(get_settings)):
    n, edges = parse_edge_list(decode_input(await request.body()))
    settings.check_node_count(n)
    t = n - 1 if sink is None else sink
    return await run_in_threadpool(edmonds_karp, n, edges, source, t, settings)


@app.get("/api/random")
def random_network(n: int = 8, density: float = 0.3, cmin: int = 1, cmax: int = 20,
                   settings: Settings = Depends(get_settings)):
    return random_graph(n, density, cmin, cmax, settings=settings)
