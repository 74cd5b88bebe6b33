"""Stand-in for template rendering: a named view plus its data as JSON."""

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def render(view: str, status_code: int = status.HTTP_200_OK, **context) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={'view': view, **jsonable_encoder(context)},
    )
