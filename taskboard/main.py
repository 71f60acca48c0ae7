import logging

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse

from .config import get_settings
from .errors import BoardError, InvariantViolation, NonEmptyColumnError, NotFoundError, ValidationError
from .schemas import (
    BoardView,
    ColumnIn,
    ColumnOut,
    ColumnPatch,
    DragEnd,
    ErrorEnvelope,
    Health,
    TaskIn,
    TaskOut,
    TaskPatch,
    Version,
    board_view,
    column_out,
    task_out,
)
from .seed import initial_board
from .storage import BoardRepository, get_repository

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    ValidationError: 422,
    NotFoundError: 404,
    NonEmptyColumnError: 409,
}


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


configure_logging(get_settings().log_level)

app = FastAPI(title="Taskboard API", version="1.0.0")


# === Error mapping ===


@app.exception_handler(BoardError)
async def board_error_handler(request: Request, exc: BoardError) -> JSONResponse:
    if isinstance(exc, InvariantViolation):
        logger.error("%s %s failed the board check: %s", request.method, request.url.path, exc.problems)
        body = ErrorEnvelope(code=exc.code, message="internal error")
        return JSONResponse(status_code=500, content=body.model_dump())
    status = next((s for cls, s in STATUS_BY_ERROR.items() if isinstance(exc, cls)), 400)
    details = {"field": exc.field} if isinstance(exc, ValidationError) and exc.field else None
    body = ErrorEnvelope(code=exc.code, message=str(exc), details=details)
    return JSONResponse(status_code=status, content=body.model_dump())


# === Health & metadata ===


@app.get("/v1/health", response_model=Health)
def health():
    return Health()


@app.get("/v1/version", response_model=Version)
def version():
    return Version(version=app.version)


# === Board ===


@app.get("/v1/board", response_model=BoardView)
def get_board(repo: BoardRepository = Depends(get_repository)):
    return board_view(repo.board)


@app.post("/v1/board:reset", response_model=BoardView)
def reset_board(repo: BoardRepository = Depends(get_repository)):
    board = repo.reset(initial_board(get_settings().seed))
    logger.info("board reset to %s seed", get_settings().seed)
    return board_view(board)


@app.post("/v1/drag-end", response_model=BoardView)
def drag_end(payload: DragEnd, repo: BoardRepository = Depends(get_repository)):
    return board_view(repo.move(payload.activeId, payload.overId))


# === Task endpoints ===


@app.post("/v1/tasks", response_model=TaskOut, status_code=201)
def create_task(payload: TaskIn, repo: BoardRepository = Depends(get_repository)):
    task = repo.create_task(payload.title, payload.description, payload.tag, payload.columnId)
    return task_out(task)


@app.patch("/v1/tasks/{task_id}", response_model=TaskOut)
def update_task(task_id: str, payload: TaskPatch, repo: BoardRepository = Depends(get_repository)):
    task = repo.edit_task(task_id, title=payload.title, description=payload.description, tag=payload.tag)
    return task_out(task)


@app.delete("/v1/tasks/{task_id}", status_code=204)
def delete_task(task_id: str, repo: BoardRepository = Depends(get_repository)):
    repo.delete_task(task_id)
    return Response(status_code=204)


# === Column endpoints ===


@app.post("/v1/columns", response_model=ColumnOut, status_code=201)
def create_column(payload: ColumnIn, repo: BoardRepository = Depends(get_repository)):
    return column_out(repo.create_column(payload.title))


@app.patch("/v1/columns/{column_id}", response_model=ColumnOut)
def rename_column(column_id: str, payload: ColumnPatch, repo: BoardRepository = Depends(get_repository)):
    return column_out(repo.rename_column(column_id, payload.title))


@app.delete("/v1/columns/{column_id}", status_code=204)
def delete_column(column_id: str, repo: BoardRepository = Depends(get_repository)):
    repo.delete_column(column_id)
    return Response(status_code=204)
