"""Example FastAPI app rendering list and grid views.

Run with:
    uvicorn examples.list_view_example_app:app --reload
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Iterator

from fastapi import Depends, FastAPI
from sqlalchemy import Column, ForeignKey, Integer, String, create_engine, select
from sqlalchemy.orm import Session, declarative_base, relationship, sessionmaker
from sqlalchemy.pool import StaticPool

from fastapi_listview.columns import DataColumn, SerialColumn
from fastapi_listview.middleware import ErrorHandlerMiddleware
from fastapi_listview.pagination import Pagination
from fastapi_listview.routers import ListViewRouter
from fastapi_listview.sort import Sort
from fastapi_listview.sqlalchemy import SQLAlchemyDataProvider
from fastapi_listview.widgets import GridView, ListView

DATABASE_URL = "sqlite://"

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
SessionLocal = sessionmaker(engine, expire_on_commit=False)

Base = declarative_base()


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    articles = relationship("Article", back_populates="author")


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    body = Column(String, nullable=False)
    author_id = Column(Integer, ForeignKey("users.id"))
    author = relationship("User", back_populates="articles")


def get_session() -> Iterator[Session]:
    with SessionLocal() as session:
        yield session


def seed_example_data(session: Session) -> None:
    """Insert example users and articles if empty."""
    if session.execute(select(User.id).limit(1)).first() is not None:
        return

    jane = User(name="Jane Doe", email="jane.doe@example.com")
    john = User(name="John Smith", email="john.smith@example.com")
    sara = User(name="Sara Lee", email="sara.lee@example.com")
    mike = User(name="Mike Chen", email="mike.chen@example.com")
    session.add_all([jane, john, sara, mike])
    session.flush()

    session.add_all(
        [
            Article(title="List views with FastAPI", body="Rendering pages of data.", author_id=jane.id),
            Article(title="Sorting in SQL", body="ORDER BY from sort links.", author_id=john.id),
            Article(title="Pagers in Bulma", body="Same pager, other markup.", author_id=sara.id),
            Article(title="Grid columns", body="Data and serial columns.", author_id=mike.id),
            Article(title="Empty states", body="What to show without data.", author_id=jane.id),
        ]
    )
    session.commit()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Base.metadata.create_all(engine)
    with SessionLocal() as session:
        seed_example_data(session)
    yield


app = FastAPI(
    title="FastAPI list view example",
    description="Example app showcasing list and grid views.",
    version="0.1.0",
    lifespan=lifespan,
)
app.add_middleware(ErrorHandlerMiddleware)
router = ListViewRouter()


def get_users_view(session: Session = Depends(get_session)) -> GridView:
    """Dependency factory for the users grid."""
    provider = SQLAlchemyDataProvider(
        session=session,
        model=User,
        pagination=Pagination(page_size=3),
        sort=Sort(attributes=["id", "name", "email"], default_order={"id": "asc"}),
    )
    return GridView(
        data_provider=provider,
        columns=[SerialColumn(), "name", DataColumn(attribute="email", label="E-mail")],
        layout="{summary}\n{items}\n{pager}",
    )


def get_articles_view(session: Session = Depends(get_session)) -> ListView:
    """Dependency factory for the articles list."""
    provider = SQLAlchemyDataProvider(
        session=session,
        model=Article,
        sort=Sort(
            attributes={
                "title": {},
                "author": {
                    "asc": {"author.name": "asc"},
                    "desc": {"author.name": "desc"},
                },
            }
        ),
    )
    return ListView(
        data_provider=provider,
        framework_css=ListView.BULMA,
        layout="{sorter}\n{items}\n{summary}\n{pager}",
        item_view=lambda article, key, index, widget: (
            f"<h2>{widget.html.encode(article.title)}</h2><p>{widget.html.encode(article.body)}</p>"
        ),
        item_view_options={"tag": "article", "class": "box"},
    )


router.register_view("/users", get_users_view)
router.register_view("/articles", get_articles_view)

app.include_router(router)
