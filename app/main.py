from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from app.database import create_db_and_tables, engine
from app.config import settings
from app.routes import (
    books,
    categories,
    health,
)
from app.seed import DatabaseSeeder

import logging
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Run DB creation and seeding ONLY in local
    if settings.env == "local":
        create_db_and_tables()
        if settings.seed_data:
            with Session(engine) as session:
                DatabaseSeeder(session).seed_data()
    yield

app = FastAPI(title="Bookstore API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def jsonable_errors(exc: RequestValidationError):
    # ctx may hold exception objects, keep only the serialisable parts
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_errors(exc)},
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Unhandled database error on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )


app.include_router(categories.router, prefix="/api/categories", tags=["Categories"])
app.include_router(books.router, prefix="/api/books", tags=["Books"])
app.include_router(health.router, prefix="/health", tags=["Health"])

@app.get("/")
def root():
    return {
        "category_endpoints": [
            "/api/categories", "/api/categories/GetAllWithPagination",
            "/api/categories/{id}", "/api/categories/search/{category}"
        ],
        "book_endpoints": [
            "/api/books", "/api/books/GetAllWithPagination",
            "/api/books/{id}", "/api/books/search/{book_name}",
            "/api/books/GetBooksByCategory/{category_id}",
            "/api/books/SearchBookWithCategory/{value}"
        ],
        "health": ["/health/check"]
    }
