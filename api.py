from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List
import uvicorn

from src.infrastructure.record_store import InMemoryRecordStore
from src.application.search_service import TextSearchService
from src.application.session import outcome_message
from src.domain.models import MAX_QUERY_LENGTH, PAGE_SIZE, SearchError

# ── Configuration ────────────────────────────────────────────────────────────
API_HOST = "0.0.0.0"
API_PORT = 8000
CORS_ORIGINS = ["http://localhost:5173", "http://localhost:8080", "http://127.0.0.1:8080"]

# ── API Models ───────────────────────────────────────────────────────────────
class SearchRequest(BaseModel):
    # No max_length here: over-long text must reach the validator and get its message
    query: str
    case_sensitive: bool = False
    page: int = 1

class RecordSchema(BaseModel):
    id: int
    title: str
    content: str

class SearchResponse(BaseModel):
    query: str
    case_sensitive: bool
    total: int
    page: int
    total_pages: int
    page_size: int = PAGE_SIZE
    show_pagination: bool
    has_previous: bool
    has_next: bool
    message: str
    results: List[RecordSchema] = Field(default_factory=list)

# ── App Initialization ───────────────────────────────────────────────────────
app = FastAPI(
    title="Simple Search API",
    description=f"Literal text search over a static record set (queries up to {MAX_QUERY_LENGTH} characters).",
    version="1.0.0"
)

# ── CORS Middleware ──────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize the engine (global scope for singleton behavior; it is stateless)
record_store = InMemoryRecordStore()
search_service = TextSearchService(record_store, page_size=PAGE_SIZE)
print(f"[API] Search service READY over {record_store.count()} records.")

# ── Endpoints ────────────────────────────────────────────────────────────────
@app.get("/")
def read_root():
    return {
        "message": "Simple Search API is running.",
        "status": "ready",
        "records": record_store.count(),
    }

@app.get("/records", response_model=List[RecordSchema])
def list_records():
    """Returns the full static record set in its fixed order."""
    return [RecordSchema(id=r.id, title=r.title, content=r.content) for r in record_store.all_records()]

@app.get("/records/{record_id}", response_model=RecordSchema)
def get_record(record_id: int):
    record = record_store.get(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Record not found")
    return RecordSchema(id=record.id, title=record.title, content=record.content)

@app.post("/search", response_model=SearchResponse)
def search(request: SearchRequest):
    """
    Validate, match and return one page. The API keeps no session: the
    client sends the page it wants and an out-of-range page is clamped.
    """
    outcome = search_service.submit(request.query, request.case_sensitive)

    if isinstance(outcome, SearchError):
        print(f"[API] Rejected query: {outcome.reason.name}")
        raise HTTPException(status_code=400, detail=outcome.message)

    view = search_service.page(outcome.matches, request.page)

    return SearchResponse(
        query=request.query,
        case_sensitive=request.case_sensitive,
        total=outcome.count,
        page=view.page_number,
        total_pages=view.total_pages,
        page_size=view.page_size,
        show_pagination=view.show_controls,
        has_previous=view.has_previous,
        has_next=view.has_next,
        message=outcome_message(outcome),
        results=[
            RecordSchema(id=r.id, title=r.title, content=r.content)
            for r in view.items
        ],
    )

if __name__ == "__main__":
    uvicorn.run(app, host=API_HOST, port=API_PORT)
