from typing import Optional

import pytest
from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer


def build_ingestion_app(status_code: int = 200, expected_token: Optional[str] = None, plain_text: bool = False) -> FastAPI:
    """
    A stand-in for an enterprise ingestion endpoint.

    Accepts a POST on any path and records what it received in app.state.received.
    """
    app = FastAPI()
    app.state.received = []
    bearer_scheme = HTTPBearer(auto_error=False)

    @app.post("/{path:path}")
    async def ingest(
        path: str,
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ):
        body = await request.json()
        app.state.received.append({
            "url": str(request.url),
            "authorization": request.headers.get("authorization"),
            "content_type": request.headers.get("content-type"),
            "body": body,
        })
        if expected_token is not None and (credentials is None or credentials.credentials != expected_token):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Invalid or expired token.",
            )
        if status_code >= 400:
            return JSONResponse(status_code=status_code, content={"detail": "ingestion backend unavailable"})
        if plain_text:
            return PlainTextResponse("stored")
        return {"status": "stored", "templateName": body["templateName"]}

    return app


@pytest.fixture
def ingestion_app():
    return build_ingestion_app()


@pytest.fixture
def enterprise_dir(tmp_path):
    """A directory named after an enterprise, ready to hold templates and configs."""
    directory = tmp_path / "acme-corp"
    directory.mkdir()
    return directory
