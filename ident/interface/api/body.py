"""Request body parsing.

Bodies are parsed by hand rather than through FastAPI body parameters so that
a missing or malformed body is reported with the Matrix error codes.
"""

import json
from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from ident.domain.error import InvalidParamError
from ident.interface.error import MissingBodyError, NotJSONError

ModelT = TypeVar("ModelT", bound=BaseModel)


async def read_json_body(request: Request, model: type[ModelT]) -> ModelT:
    """Parse the request body as a JSON object into ``model``.

    Raises:
        MissingBodyError: If the body is empty
        NotJSONError: If the body is not a JSON object
        InvalidParamError: If a field has the wrong type
    """
    raw = await request.body()
    if not raw.strip():
        raise MissingBodyError()

    try:
        data = json.loads(raw)
    except ValueError:
        raise NotJSONError()
    if not isinstance(data, dict):
        raise NotJSONError()

    try:
        return model.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "body"
        raise InvalidParamError(f"Invalid param {field}: {error['msg']}")
