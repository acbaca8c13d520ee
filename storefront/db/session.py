from fastapi import Request
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

def build_engine(database_url: str):
    # check_same_thread is needed for SQLite, remove for PostgreSQL
    connect_args = {"check_same_thread": False} if "sqlite" in database_url else {}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        # One shared connection, otherwise every checkout sees an empty database
        return create_engine(database_url, connect_args=connect_args, poolclass=StaticPool)
    return create_engine(database_url, connect_args=connect_args)

def get_session(request: Request):
    with Session(request.app.state.engine) as session:
        yield session

def create_db_and_tables(engine):
    SQLModel.metadata.create_all(engine)
